"""Create all standard extensions."""
from flask_sqlalchemy import SQLAlchemy

__all__ = ("db",)

db = SQLAlchemy()
