from types import SimpleNamespace

__all__ = (
    "BindingError",
    "CatalogError",
    "FieldMissingError",
    "ServiceNotFoundError",
)


class BindingError(Exception):
    def __init__(self, reason, **meta):
        self.meta = SimpleNamespace(**meta)

        super().__init__(reason)

    def __str__(self):
        if self.meta.__dict__:
            meta = ", ".join(
                f"{k}={v}" for k, v in self.meta.__dict__.items() if bool(v)
            )
            if meta:
                return f"{super().__str__()} ({meta})"

        return super().__str__()


class CatalogError(BindingError, ValueError):
    """The catalog is valid JSON but does not have the expected shape."""


class ServiceNotFoundError(BindingError, LookupError):
    def __init__(self, name):
        super().__init__("service not found", name=name)

        self.name = name


class FieldMissingError(BindingError):
    """One or more required fields of a service configuration are missing.

    Check for this condition with ``isinstance``; the message text lists the
    field names in no particular order.
    """

    def __init__(self, fields):
        self.fields = list(fields)

        super().__init__("field(s) missing: " + ", ".join(self.fields))
