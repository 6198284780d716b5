""""""
from .models import TAGS_FIELD, SolrDocument, SolrResult, Tag
from .service import SearchError, SearchService
from .session import SearchSession

__all__ = (
    "TAGS_FIELD",
    "SearchError",
    "SearchService",
    "SearchSession",
    "SolrDocument",
    "SolrResult",
    "Tag",
    "service",
)

service = SearchService()
