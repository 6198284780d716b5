""""""
from .models import Case
from .service import CaseService

__all__ = ("Case", "CaseService", "service")

service = CaseService()
