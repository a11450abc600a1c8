"""
environment holds the services resolved from one catalog load.
"""
import logging
from copy import deepcopy
from enum import Enum
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from .error import ServiceNotFoundError

__all__ = (
    "Environment",
    "Source",
    "UnmarshalService",
)

log = logging.getLogger(__name__)


class Source(str, Enum):
    """Where the catalog of an Environment was read from."""

    FILE = "file"
    ENVIRONMENT = "environment"
    RAW = "raw"

    def __str__(self):
        return self.value


@runtime_checkable
class UnmarshalService(Protocol):
    """The capability a load target has to provide.

    A target is any object with an `unmarshal_service(payload)` method that
    populates itself from one service payload (the decoded JSON object of a
    single service) or raises. The payload is decoded, not the verbatim
    text: numbers beyond float precision, e.g. `1.0000000000000000001`,
    arrive rounded.
    """

    def unmarshal_service(self, payload):
        ...


class Environment:
    """
    Environment maps lower-cased service names to their payloads. It is
    read-only after construction.
    """

    __slots__ = ("_source", "_services")

    def __init__(self, source, services_by_name):
        self._source = Source(source)
        self._services = MappingProxyType(dict(services_by_name))

    @property
    def source(self):
        return self._source

    @property
    def services_by_name(self):
        return self._services

    def get(self, name, default=None):
        if name.lower() not in self._services:
            return default

        return deepcopy(self._services[name.lower()])

    def load_service(self, target, name):
        """Populate `target` from the payload of the service called `name`.

        The lookup ignores case. Errors raised by the target propagate
        unchanged.
        """
        if not isinstance(target, UnmarshalService):
            raise TypeError(
                f"'{type(target).__name__}' object has no unmarshal_service method"
            )

        key = name.lower()
        if key not in self._services:
            raise ServiceNotFoundError(name)

        log.debug("loading service %r into %s", key, type(target).__name__)
        target.unmarshal_service(deepcopy(self._services[key]))
        return target

    def __contains__(self, name):
        return isinstance(name, str) and name.lower() in self._services

    def __iter__(self):
        return iter(self._services)

    def __len__(self):
        return len(self._services)

    def __repr__(self):
        names = ", ".join(sorted(self._services))
        return f"{type(self).__name__}(source={self._source.value!r}, services=[{names}])"
