"""Add or remove a tag on in-memory documents, and serialize the result as a
Solr atomic update batch.

Tags are compared on their value, case insensitively: "Foo", "foo" and
"FOO" are the same tag.
"""
import json
from typing import Iterable, List, Sequence

from casesearch.services.search.models import TAGS_FIELD, SolrDocument, Tag


def _same_tag(tag: Tag, value: str) -> bool:
    return value.lower() == (tag.value or "").lower()


def contains_tag(tags: Iterable[Tag], value: str) -> bool:
    return any(_same_tag(tag, value) for tag in tags)


def add_tag(document: SolrDocument, value: str) -> bool:
    """Append `value` to `document` tags unless already present.

    :returns: `True` if the document was changed.
    """
    if contains_tag(document.tags, value):
        return False

    document.tags.append(Tag(value, value))
    return True


def remove_tag(document: SolrDocument, value: str) -> int:
    """Remove every occurrence of `value` from `document` tags.

    :returns: number of tags removed.
    """
    kept = [tag for tag in document.tags if not _same_tag(tag, value)]
    removed = len(document.tags) - len(kept)
    document.tags[:] = kept
    return removed


def update_tags(documents: Iterable[SolrDocument], value: str, remove: bool) -> int:
    """Add (or remove) `value` on each document.

    :returns: number of documents changed.
    """
    changed = 0
    for document in documents:
        if remove:
            changed += bool(remove_tag(document, value))
        else:
            changed += add_tag(document, value)
    return changed


def build_update_json(documents: Sequence[SolrDocument]) -> str:
    """Solr update batch replacing the tags field of each document."""
    batch: List[dict] = [
        {"id": document.document_id, TAGS_FIELD: {"set": document.tag_values}}
        for document in documents
    ]
    return json.dumps(batch)
