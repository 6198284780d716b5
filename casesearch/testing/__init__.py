"""Elements to build tests for a :class:`casesearch.app.Application`"""
from .fixtures import TestConfig
from .solr import FakeSolrIndex

__all__ = ("FakeSolrIndex", "TestConfig")
