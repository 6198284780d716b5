"""Configuration and injectable fixtures for Pytest.

Can be reused (and overriden) by adding::

   pytest_plugins = ['casesearch.testing.fixtures']

to your `conftest.py`.
"""
from typing import Any, Iterator

from flask.ctx import AppContext
from flask_sqlalchemy import SQLAlchemy
from pytest import fixture
from sqlalchemy.orm import Session

from casesearch.app import Application, create_app
from casesearch.services.cases import Case

from .solr import FakeSolrIndex


class TestConfig:
    TESTING = True
    SECRET_KEY = "SECRET"
    SERVER_NAME = "localhost.localdomain"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SOLR_ENDPOINT = "http://solr.example.com:8983"
    SOLR_TIMEOUT = 5
    SEARCH_NUMBER_OF_ROWS = 2


@fixture
def config() -> type:
    return TestConfig


@fixture
def app(config: Any) -> Application:
    # We currently return a fresh app for each test.
    return create_app(config=config)


@fixture
def app_context(app: Application) -> Iterator[AppContext]:
    with app.app_context() as ctx:
        yield ctx


@fixture
def db(app_context: AppContext) -> Iterator[SQLAlchemy]:
    """Return a fresh db for each test."""
    from casesearch.core.extensions import db

    db.create_all()
    yield db

    db.session.remove()
    db.drop_all()


@fixture
def session(db: SQLAlchemy) -> Session:
    return db.session


@fixture
def case(session: Session) -> Case:
    case = Case(name="Acme v. Widgets", solr_source_core="acme_widgets")
    session.add(case)
    session.commit()
    return case


@fixture
def solr(app: Application) -> FakeSolrIndex:
    """In-memory Solr core, registered as the "search" service of `app`."""
    index = FakeSolrIndex()
    index.init_app(app)
    return index
