"""In-memory views of Solr documents, restricted to what tagging needs."""
from typing import Any, Dict, List, Optional

#: Solr field holding document tags
TAGS_FIELD = "tags-search-field"


class Tag:
    """A tag attached to a document.

    Tags applied by the tagging service always have the same `name` and
    `value`.
    """

    def __init__(self, name: str, value: Optional[str] = None) -> None:
        self.name = name
        self.value = name if value is None else value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return (self.name, self.value) == (other.name, other.value)

    def __repr__(self) -> str:
        return f"<Tag name={self.name!r} value={self.value!r}>"


class SolrDocument:
    """Identifier and tags of one indexed document."""

    def __init__(self, document_id: str, tags: Optional[List[Tag]] = None) -> None:
        self.document_id = document_id
        self.tags = tags if tags is not None else []

    @classmethod
    def from_solr(cls, doc: Dict[str, Any]) -> "SolrDocument":
        values = doc.get(TAGS_FIELD) or []
        if isinstance(values, str):
            values = [values]
        return cls(str(doc["id"]), [Tag(v, v) for v in values])

    @property
    def tag_values(self) -> List[str]:
        return [t.value for t in self.tags]

    def __repr__(self) -> str:
        return f"<SolrDocument id={self.document_id!r} tags={self.tag_values!r}>"


class SolrResult:
    """One page of search results."""

    def __init__(
        self, total_size: int = 0, documents: Optional[Dict[str, SolrDocument]] = None
    ) -> None:
        #: number of documents matching the query, all pages included
        self.total_size = total_size
        #: document id -> document, in result order
        self.documents = documents if documents is not None else {}

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "SolrResult":
        """Build a result from a decoded Solr `select` JSON response.

        :raise KeyError: if response has no `response` section.
        """
        response = data["response"]
        documents = {}
        for doc in response.get("docs", ()):
            document = SolrDocument.from_solr(doc)
            documents[document.document_id] = document
        return cls(int(response.get("numFound", len(documents))), documents)

    def __len__(self) -> int:
        return len(self.documents)
