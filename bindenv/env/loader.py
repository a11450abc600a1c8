"""
loader reads a service-binding catalog and resolves it into an Environment.

The catalog comes from one of three places:
1. The `VCAP_SERVICES` environment variable (`Source.ENVIRONMENT`)
2. A file, `default-env.json` unless told otherwise (`Source.FILE`)
3. Any readable stream (`Source.RAW`)

Its shape is

    {"VCAP_SERVICES": {"<category>": [{"name": "<service>", ...}, ...], ...}}

and every service object is indexed under its lower-cased name.
"""
import io
import json
import logging
import os
import textwrap

import ruamel.yaml as yaml

from .environment import Environment, Source
from .error import CatalogError

__all__ = (
    "DEFAULT_ENV_FILE",
    "ENVIRONMENT_KEY",
    "load_env",
    "load_env_from_bytes",
    "load_env_from_file",
    "load_env_from_reader",
)

log = logging.getLogger(__name__)


DEFAULT_ENV_FILE = "default-env.json"
ENVIRONMENT_KEY = "VCAP_SERVICES"


def load_env(key=ENVIRONMENT_KEY, path=DEFAULT_ENV_FILE, getenv=None):
    """Load the catalog from the `key` variable, or from `path` if it is unset.

    `getenv` looks up a variable by name and returns None when it is unset;
    it defaults to `os.environ.get`.
    """
    if getenv is None:
        getenv = os.environ.get

    value = getenv(key)
    if value is not None:
        return load_env_from_bytes(value, Source.ENVIRONMENT, key=key)

    log.debug("%s is not set, falling back to %s", key, path)
    return load_env_from_file(path, key=key)


def load_env_from_file(path, key=ENVIRONMENT_KEY):
    with open(path, "rb") as f:
        data = f.read()

    return load_env_from_bytes(data, Source.FILE, key=key)


def load_env_from_reader(reader, key=ENVIRONMENT_KEY):
    return load_env_from_bytes(reader.read(), Source.RAW, key=key)


def load_env_from_bytes(data, source, key=ENVIRONMENT_KEY):
    """Parse `data` (bytes or str) and index its services by lower-cased name.

    JSON syntax errors propagate as json.JSONDecodeError, the non-JSON
    constants NaN and Infinity raise ValueError and a document of the wrong
    shape raises CatalogError. Either way no Environment is built.
    """
    source = Source(source)
    document = json.loads(data, parse_constant=_reject_constant)

    services = {}
    for category, items in _iter_categories(document, key):
        for item in items:
            name = _service_name(item, category)
            lowered = name.lower()
            if lowered in services:
                log.warning(
                    "service %r is declared more than once, the later one wins",
                    lowered,
                )
            services[lowered] = item

    log.debug("loaded %d service(s) from %s", len(services), source)
    return Environment(source, services)


def _iter_categories(document, key):
    # A missing or null catalog is empty, not malformed.
    if document is None:
        return

    if not isinstance(document, dict):
        raise CatalogError(
            f"Catalog should be a JSON object, got '{_json_type(document)}'"
        )

    catalog = document.get(key)
    if catalog is None:
        return

    if not isinstance(catalog, dict):
        raise CatalogError(
            f"'{key}' should map categories to service lists, "
            f"got '{_json_type(catalog)}'"
        )

    for category, items in catalog.items():
        if items is None:
            continue
        if not isinstance(items, list):
            raise CatalogError(
                f"Services should be a list, got '{_json_type(items)}'",
                category=category,
            )

        yield category, items


def _service_name(item, category):
    if not isinstance(item, dict):
        raise CatalogError(
            f"Service should be a JSON object, got '{_json_type(item)}'",
            category=category,
        )

    # Keys match case-insensitively and the last non-null one wins.
    name = None
    for k, v in item.items():
        if k.lower() == "name" and v is not None:
            name = v
    if name is None:
        return ""

    if not isinstance(name, str):
        definition = textwrap.indent(_dump_obj(item), " " * 2)
        raise CatalogError(
            f"Service name in category '{category}' should be a string:\n"
            f"{definition}"
        )

    return name


def _reject_constant(name):
    raise ValueError(f"Invalid JSON constant '{name}'")


def _dump_obj(obj):
    stream = io.StringIO()
    dumper = yaml.YAML(typ="safe", pure=True)
    dumper.default_flow_style = False
    dumper.dump(obj, stream)
    return stream.getvalue()


def _json_type(value):
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"
