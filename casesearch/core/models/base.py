""""""
from sqlalchemy.schema import Column
from sqlalchemy.types import Integer

from casesearch.core.extensions import db


#: Base Model class.
class Model(db.Model):
    __abstract__ = True


class IdMixin:
    id = Column(Integer, primary_key=True)
