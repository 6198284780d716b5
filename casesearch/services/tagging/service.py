"""Apply or remove tags on documents of a case.

Solr has no transactions: tagging is done by fetching the tags of the target
documents, changing them in memory and posting them back. All operations of
this service hold one process-wide lock from the first fetch to the last
update, so that two tagging requests never interleave their read-modify-write
cycles. Work done on earlier pages of a multi-page operation is not rolled
back when a later page fails.
"""
import threading
from enum import Enum
from functools import wraps
from typing import TYPE_CHECKING, Callable, List, Optional

from casesearch.services import Service, get_service
from casesearch.services.search import TAGS_FIELD, SearchError, SolrDocument
from casesearch.services.search.query import term_query

from .mutator import build_update_json, update_tags

if TYPE_CHECKING:
    from casesearch.services.cases import Case, CaseService
    from casesearch.services.search import SearchService, SearchSession

#: only fields needed to rewrite tags are fetched
TAG_FIELD_LIST = f"id,{TAGS_FIELD}"


class Result(Enum):
    SUCCESS = "success"
    ERROR = "error"


class NoActiveCase(Exception):
    """Raised when an operation has no case to address its Solr requests to."""


def exclusive(meth: Callable[..., Result]) -> Callable[..., Result]:
    """Decorator for :class:`TagService` operations: run `meth` holding the
    service lock, and turn request failures into :attr:`Result.ERROR`."""

    @wraps(meth)
    def locked(self: "TagService", *args, **kwargs) -> Result:
        with self._lock:
            try:
                return meth(self, *args, **kwargs)
            except NoActiveCase:
                self.logger.error("%s: no active case", meth.__name__)
                return Result.ERROR
            except SearchError:
                self.logger.error("%s: search failed", meth.__name__, exc_info=True)
                return Result.ERROR

    return locked


class TagService(Service):
    name = "tagging"

    def __init__(self, *args, **kwargs) -> None:
        self._lock = threading.Lock()
        super().__init__(*args, **kwargs)

    @property
    def search_service(self) -> "SearchService":
        return get_service("search")

    @property
    def case_service(self) -> "CaseService":
        return get_service("cases")

    @property
    def page_size(self) -> int:
        return self.config("SEARCH_NUMBER_OF_ROWS")

    #
    # Public API
    #
    @exclusive
    def tag_document(
        self, case: Optional["Case"], document_id: str, tag: str
    ) -> Result:
        """Tag a single document identified by its document id."""
        return self._process(case, term_query("id", document_id), tag, 0, 1)

    @exclusive
    def tag_page_documents(self, search_session: "SearchSession", tag: str) -> Result:
        """Tag all documents of the current page of search results."""
        rows = self.page_size
        start = (search_session.current_page - 1) * rows
        query = search_session.build_search_query()
        return self._process(search_session.case, query, tag, start, rows)

    @exclusive
    def tag_all_documents(self, search_session: "SearchSession", tag: str) -> Result:
        """Tag all documents matched by the current search."""
        query = search_session.build_search_query()
        rows = search_session.total_documents
        return self._process(search_session.case, query, tag, 0, rows)

    @exclusive
    def remove_tag(
        self, case: Optional["Case"], document_id: str, tag: str
    ) -> Result:
        """Remove a tag from the document identified by `document_id`.

        The tag is unregistered from the case when no other document carries
        it. If the search for such documents fails the result is
        :attr:`Result.ERROR`, although the document itself was updated.
        """
        query = term_query("id", document_id)
        result = self._process(case, query, tag, 0, 1, remove=True)

        if result is Result.SUCCESS:
            remaining = self._fetch(case, term_query(TAGS_FIELD, tag), 0, 1)
            if not remaining:
                self.case_service.remove_tag(case, tag)

        return result

    @exclusive
    def remove_tag_from_all_documents(
        self, case: Optional["Case"], tag: str
    ) -> Result:
        """Remove a tag from every document bearing it, and unregister it from
        the case."""
        self._check_case(case)
        query = term_query(TAGS_FIELD, tag)
        rounds = 0

        # removing the tag takes documents out of the query results, so the
        # first page is fetched again until it comes back empty
        while True:
            documents = self._fetch(case, query, 0, self.page_size)
            if not documents:
                break

            if not update_tags(documents, tag, remove=True):
                # documents match the query but none carries the tag: looping
                # again would fetch the same page forever
                self.logger.error(
                    "Tag %r: %d matching documents don't carry it, aborting",
                    tag,
                    len(documents),
                )
                return Result.ERROR

            if not self._send_update(case, documents):
                return Result.ERROR
            rounds += 1

        self.logger.info("Tag %r removed from all documents (%d updates)", tag, rounds)
        self.case_service.remove_tag(case, tag)
        return Result.SUCCESS

    #
    # Internals. All must be called with lock held.
    #
    def _process(
        self,
        case: Optional["Case"],
        query: str,
        tag: str,
        start: int,
        rows: int,
        remove: bool = False,
    ) -> Result:
        """Fetch one window of `query` results, add or remove `tag` on each
        document and send them back to Solr."""
        self._check_case(case)
        if rows <= 0:
            return Result.SUCCESS

        documents = self._fetch(case, query, start, rows)
        if not documents:
            return Result.SUCCESS

        update_tags(documents, tag, remove)
        if not self._send_update(case, documents):
            return Result.ERROR

        if not remove:
            self.case_service.add_tag(case, tag)

        return Result.SUCCESS

    def _check_case(self, case: Optional["Case"]) -> None:
        if case is None or not case.solr_source_core:
            raise NoActiveCase()

    def _fetch(
        self, case: "Case", query: str, start: int, rows: int
    ) -> List[SolrDocument]:
        result = self.search_service.search(
            case,
            query,
            start,
            rows,
            sort=None,
            highlight=False,
            field_list=TAG_FIELD_LIST,
        )
        return list(result.documents.values())

    def _send_update(self, case: "Case", documents: List[SolrDocument]) -> bool:
        return self.search_service.update(case, build_update_json(documents))
