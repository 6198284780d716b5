import logging
from typing import TYPE_CHECKING, Any, Optional

from flask import current_app

from casesearch.core.util import fqcn

if TYPE_CHECKING:
    from casesearch.app import Application


class ServiceNotRegistered(Exception):
    pass


class ServiceState:
    """Service state stored in Application.extensions."""

    #: reference to :class:`Service` instance
    service: "Service"

    running = False

    def __init__(self, service: "Service", running: bool = False) -> None:
        self.service = service
        self.running = running
        self.logger = logging.getLogger(fqcn(self.__class__))


class Service:
    """Base class for services.

    A service is a Flask extension: one instance per process, with its
    per-application data kept in a :class:`ServiceState` stored in
    `app.extensions`.
    """

    #: State class to use for this Service
    AppStateClass = ServiceState

    #: service name in Application.extensions / Application.services
    name = ""

    def __init__(self, app: Optional[Any] = None) -> None:
        if not self.name:
            msg = f"Service must have a name ({fqcn(self.__class__)})"
            raise ValueError(msg)

        self.logger = logging.getLogger(fqcn(self.__class__))
        if app:
            self.init_app(app)

    def init_app(self, app: "Application") -> None:
        app.extensions[self.name] = self.AppStateClass(self)
        app.services[self.name] = self

    def start(self, ignore_state: bool = False) -> None:
        """Starts the service."""
        self.logger.debug("Start service")
        self._toggle_running(True, ignore_state)

    def stop(self, ignore_state: bool = False) -> None:
        """Stops the service."""
        self.logger.debug("Stop service")
        self._toggle_running(False, ignore_state)

    def _toggle_running(self, run_state: bool, ignore_state: bool = False) -> None:
        state = self.app_state
        run_state = bool(run_state)
        if not ignore_state:
            assert run_state ^ state.running
        state.running = run_state

    @property
    def app_state(self) -> ServiceState:
        """Current service state in current application.

        :raise:RuntimeError if working outside application context.
        """
        try:
            return current_app.extensions[self.name]
        except KeyError:
            raise ServiceNotRegistered(self.name)

    @property
    def running(self) -> bool:
        """
        :returns: `False` if working outside application context, if service is
                  not registered on current application, or if service is halted
                  for current application.
        """
        try:
            return self.app_state.running
        except (RuntimeError, ServiceNotRegistered):
            # RuntimeError: happens when current_app is None: working outside
            # application context
            return False

    def config(self, key: str, default: Any = None) -> Any:
        """Value of `key` in current application configuration."""
        return current_app.config.get(key, default)


def get_service(service: str) -> Service:
    try:
        return current_app.services[service]
    except KeyError:
        raise ServiceNotRegistered(service)
