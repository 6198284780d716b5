""""""
from .service import NoActiveCase, Result, TagService

__all__ = ("NoActiveCase", "Result", "TagService", "service")

service = TagService()
