"""Modules that provide services.

They are implemented as Flask extensions (see:
http://flask.pocoo.org/docs/extensiondev/ )
"""
# This one must be imported first
from .base import Service, ServiceNotRegistered, ServiceState, get_service

# Don't remove (used to force import order)
assert Service, ServiceState

from .cases import service as case_service
from .search import service as search_service
from .tagging import service as tag_service

__all__ = (
    "Service",
    "ServiceNotRegistered",
    "ServiceState",
    "case_service",
    "get_service",
    "search_service",
    "tag_service",
)
