from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from .query import MATCH_ALL, term_query

if TYPE_CHECKING:
    from casesearch.services.cases.models import Case

#: (field, value); a `None` field means free text in Solr query syntax
Criterion = Tuple[Optional[str], str]


class SearchSession:
    """Snapshot of a user's current search: selected case, criteria and
    position in the result set.

    The web layer builds one per request and hands it to the services which
    need it.
    """

    def __init__(
        self,
        case: Optional["Case"],
        criteria: Iterable[Criterion] = (),
        current_page: int = 1,
        total_documents: int = 0,
    ) -> None:
        self.case = case
        self.criteria: List[Criterion] = list(criteria)
        self.current_page = current_page
        self.total_documents = total_documents

    def add_criterion(self, field: Optional[str], value: str) -> None:
        self.criteria.append((field, value))

    def remove_criterion(self, index: int) -> None:
        del self.criteria[index]

    def build_search_query(self) -> str:
        """Solr query matching all criteria; every document if there is none."""
        clauses = []
        for field, value in self.criteria:
            value = value.strip()
            if not value:
                continue
            if field:
                clauses.append(term_query(field, value))
            else:
                clauses.append(f"({value})")

        if not clauses:
            return MATCH_ALL
        return " AND ".join(clauses)

    def __repr__(self):
        return "<SearchSession case={!r} page={} total={} query={!r}>".format(
            self.case,
            self.current_page,
            self.total_documents,
            self.build_search_query(),
        )
