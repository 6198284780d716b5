"""Client for the Solr cores holding case documents.

Each case has its documents in its own core, addressed as
``<SOLR_ENDPOINT>/solr/<core>/``. Only the two request handlers needed by
tagging are used: ``select`` to fetch documents and ``update`` to post
atomic field updates.
"""
from typing import TYPE_CHECKING, Dict, Optional, Union

import requests

from casesearch.services.base import Service

from .models import SolrResult

if TYPE_CHECKING:
    from casesearch.services.cases.models import Case


class SearchError(Exception):
    """A `select` request failed or returned an unusable response."""


class SearchService(Service):
    """Search and update documents of a case."""

    name = "search"

    @property
    def timeout(self) -> float:
        return self.config("SOLR_TIMEOUT", 30)

    def core_url(self, case: "Case", handler: str) -> str:
        endpoint = self.config("SOLR_ENDPOINT").rstrip("/")
        return f"{endpoint}/solr/{case.solr_source_core}/{handler}"

    def search(
        self,
        case: "Case",
        query: str,
        start: int = 0,
        rows: Optional[int] = None,
        sort: Optional[str] = None,
        highlight: bool = False,
        field_list: Optional[str] = None,
    ) -> SolrResult:
        """Run `query` on the core of `case`.

        :param start: offset of first document to return.
        :param rows: max number of documents; defaults to
            `SEARCH_NUMBER_OF_ROWS`.
        :param sort: Solr sort specification, e.g. `"date desc"`.
        :param highlight: request highlighting of matched terms.
        :param field_list: comma separated list of fields to return.

        :raise SearchError: on network error, non-success status or
            malformed response.
        """
        if rows is None:
            rows = self.config("SEARCH_NUMBER_OF_ROWS")

        params: Dict[str, Union[str, int]] = {
            "q": query,
            "start": start,
            "rows": rows,
            "wt": "json",
        }
        if sort:
            params["sort"] = sort
        if highlight:
            params["hl"] = "true"
        if field_list:
            params["fl"] = field_list

        url = self.core_url(case, "select")
        self.logger.debug("Search request to: %s, params: %r", url, params)

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return SolrResult.from_response(response.json())
        except requests.RequestException as e:
            raise SearchError(f"Search on {url} failed: {e}") from e
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            # ValueError: body is not JSON
            raise SearchError(f"Invalid response from {url}: {e!r}") from e

    def update(self, case: "Case", payload: str) -> bool:
        """Post a JSON update batch to the core of `case` and commit it.

        :returns: `False` if the request could not be sent or Solr answered
                  with an error status.
        """
        url = self.core_url(case, "update")
        self.logger.debug("Will send request to: %s, data: %s", url, payload)

        try:
            response = requests.post(
                url,
                params={"commit": "true", "wt": "xml"},
                data=payload.encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException:
            self.logger.error(
                "Problem tagging: update on %s failed", url, exc_info=True
            )
            return False

        return True
