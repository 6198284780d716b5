from typing import Any, Dict

from flask import Flask
from werkzeug.datastructures import ImmutableDict


class DefaultConfig:
    # Seriously: this need to be changed in production
    SECRET_KEY = "CHANGEME"

    # SQLAlchemy
    SQLALCHEMY_DATABASE_URI = "sqlite:///casesearch.db"
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging: path relative to instance folder, `.ini` or `.yml`
    LOGGING_CONFIG_FILE = None
    LOG_LEVEL = None

    # Solr
    SOLR_ENDPOINT = "http://localhost:8983"
    #: seconds to wait for Solr to answer
    SOLR_TIMEOUT = 30

    #: documents per page of search results; also the batch size used when
    #: removing a tag from all documents
    SEARCH_NUMBER_OF_ROWS = 10


default_config: Dict[str, Any] = dict(Flask.default_config)
default_config.update(
    {k: v for k, v in vars(DefaultConfig).items() if k.isupper()}
)
default_config = ImmutableDict(default_config)
