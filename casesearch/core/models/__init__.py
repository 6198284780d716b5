""""""
from .base import IdMixin, Model

__all__ = ("IdMixin", "Model")
