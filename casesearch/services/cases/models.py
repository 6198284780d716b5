""""""
from typing import Any

import sqlalchemy as sa

from casesearch.core.models import IdMixin, Model
from casesearch.core.sqlalchemy import JSONList


class Case(IdMixin, Model):
    """A collection of documents under review, indexed in its own Solr core.

    `tags` lists the tags known to be in use on the case documents. It is
    kept in sync by the tagging service.
    """

    __tablename__ = "search_case"

    name = sa.Column(sa.UnicodeText(), nullable=False, default="")

    description = sa.Column(sa.UnicodeText(), nullable=False, default="")

    #: name of the Solr core holding the documents of this case
    solr_source_core = sa.Column(sa.UnicodeText(), nullable=False)

    tags = sa.Column(JSONList(unique_sorted=True), nullable=False)

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("tags", [])
        super().__init__(**kwargs)

    def add_tag(self, tag: str) -> None:
        if tag not in self.tags:
            self.tags.append(tag)

    def remove_tag(self, tag: str) -> None:
        while tag in self.tags:
            self.tags.remove(tag)

    def __repr__(self):
        cls = self.__class__
        return (
            "<{mod}.{cls} id={c.id!r} name={c.name!r} "
            "core={c.solr_source_core!r}>".format(
                mod=cls.__module__, cls=cls.__name__, c=self
            )
        )
