"""
bindenv resolves bound-service configuration (VCAP_SERVICES) into
case-insensitive, typed lookups.
"""
from .env import *  # noqa: F401,F403
from .env import __all__ as _env_all

__version__ = "0.1.0"

__all__ = ("__version__",) + _env_all
