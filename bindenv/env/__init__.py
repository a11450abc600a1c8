from .environment import Environment, Source, UnmarshalService
from .error import (
    BindingError,
    CatalogError,
    FieldMissingError,
    ServiceNotFoundError,
)
from .fields import Fields, check_all_fields, missing_field_error
from .loader import (
    DEFAULT_ENV_FILE,
    ENVIRONMENT_KEY,
    load_env,
    load_env_from_bytes,
    load_env_from_file,
    load_env_from_reader,
)
from .serviceitem import ServiceItem

__all__ = (
    "BindingError",
    "CatalogError",
    "DEFAULT_ENV_FILE",
    "ENVIRONMENT_KEY",
    "Environment",
    "FieldMissingError",
    "Fields",
    "ServiceItem",
    "ServiceNotFoundError",
    "Source",
    "UnmarshalService",
    "check_all_fields",
    "load_env",
    "load_env_from_bytes",
    "load_env_from_file",
    "load_env_from_reader",
    "missing_field_error",
)
