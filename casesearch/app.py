"""Base Flask application class, used by tests or to be extended in real
applications."""
import logging
import logging.config
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from flask import Flask

from casesearch.config import default_config
from casesearch.core.extensions import db
from casesearch.services import Service, case_service, search_service, \
    tag_service

logger = logging.getLogger(__name__)

__all__ = ["create_app", "Application", "ServiceManager"]

DEFAULT_LOGGING_FILE = Path(__file__).parent / "core" / "default_logging.yml"


class ServiceManager:
    """Mixin that provides lifecycle (register/start/stop) support for
    services."""

    services: Dict[str, Service]

    def __init__(self) -> None:
        self.services = {}

    def start_services(self) -> None:
        for svc in self.services.values():
            if not svc.running:
                svc.start()

    def stop_services(self) -> None:
        for svc in self.services.values():
            if svc.running:
                svc.stop()


class Application(ServiceManager, Flask):
    """Base application class.

    Extend it in your own app.
    """

    default_config = default_config

    def __init__(self, name: Optional[Any] = None, *args: Any, **kwargs: Any) -> None:
        name = name or __name__

        Flask.__init__(self, name, *args, **kwargs)
        ServiceManager.__init__(self)

    def setup(self, config: Optional[type]) -> None:
        self.configure(config)
        self.setup_logging()
        self.init_extensions()

        # Tests start the services they need
        if not self.testing:
            with self.app_context():
                self.start_services()

    def configure(self, config: Optional[type]) -> None:
        if config:
            self.config.from_object(config)

        insecure = self.config["SECRET_KEY"] == "CHANGEME"
        if insecure and not (self.debug or self.testing):
            logger.error("You must change the default secret config ('SECRET_KEY')")
            sys.exit()

        rows = self.config["SEARCH_NUMBER_OF_ROWS"]
        if not isinstance(rows, int) or rows < 1:
            raise ValueError(
                f"SEARCH_NUMBER_OF_ROWS must be a positive integer, got {rows!r}"
            )

        if not self.config.get("SOLR_ENDPOINT"):
            raise ValueError("SOLR_ENDPOINT is not set")

    def setup_logging(self) -> None:
        # Force flask to create application logger before logging
        # configuration; else, flask will overwrite our settings
        self.logger  # noqa

        log_level = self.config.get("LOG_LEVEL")
        if log_level:
            self.logger.setLevel(log_level)

        logging_file = self.config.get("LOGGING_CONFIG_FILE")
        if logging_file:
            logging_file = (Path(self.instance_path) / logging_file).resolve()
        elif self.testing:
            # leave logging to the test runner
            return
        else:
            logging_file = DEFAULT_LOGGING_FILE

        if logging_file.suffix == ".ini":
            # old standard 'ini' file config
            logging.config.fileConfig(
                str(logging_file), disable_existing_loggers=False
            )
        elif logging_file.suffix == ".yml":
            with logging_file.open() as fd:
                logging_cfg = yaml.safe_load(fd)
            logging_cfg.setdefault("version", 1)
            logging_cfg.setdefault("disable_existing_loggers", False)
            logging.config.dictConfig(logging_cfg)
        else:
            logger.warning("Unknown logging config file type: %s", logging_file)

    def init_extensions(self) -> None:
        """Initialize flask extensions and services."""
        db.init_app(self)

        search_service.init_app(self)
        case_service.init_app(self)
        tag_service.init_app(self)


def create_app(
    config: Optional[type] = None, app_class: type = Application, **kw: Any
) -> Application:
    app = app_class(**kw)
    app.setup(config=config)
    return app
