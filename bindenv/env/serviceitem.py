from types import SimpleNamespace
from copy import copy

from .error import BindingError
from .fields import check_all_fields, missing_field_error

__all__ = ("ServiceItem",)


def _is_present(value):
    return value is not None and value != ""


class ServiceItem(SimpleNamespace):
    """A class that is intended to be inherited to declare the fields of a
    service configuration, e.g.

        class UAAConfig(ServiceItem, fields="clientid,url", section="credentials"):
            pass

        uaa = UAAConfig.load(env, "my-uaa")

    Fields without a default are required. Values are picked from `section`
    of the service payload, or from the payload itself if `section` is empty.
    """

    __slots__ = ()

    def __init__(self, **kwargs):
        required = {
            field: _is_present(kwargs.get(field))
            for field in self._fields
            if field not in self._defaults
        }
        check_all_fields(required)

        new_kwargs = {}
        for field in self._fields:
            if field in kwargs:
                new_kwargs[field] = kwargs.pop(field)
            else:
                new_kwargs[field] = copy(self._defaults.get(field))

        if kwargs:
            names = ", ".join(kwargs)
            raise BindingError(
                f"{self.__class__.__name__} get unexpected field(s) '{names}'"
            )

        # Call SimpleNamespace.__init__ to set field values.
        super().__init__(**new_kwargs)

        for field in self._fields:
            value = getattr(self, field)

            # transform value
            if hasattr(self, f"_transform_{field}"):
                value = getattr(self, f"_transform_{field}")(value)
                setattr(self, field, value)

            # validate value
            if hasattr(self, f"_validate_{field}"):
                getattr(self, f"_validate_{field}")(value)

    def __init_subclass__(cls, fields=None, defaults=None, section=None, **kwargs):
        super().__init_subclass__(**kwargs)

        # a subclass that declares nothing keeps what it inherits
        if fields is None:
            fields = getattr(cls, "_fields", ())
        if defaults is None:
            defaults = getattr(cls, "_defaults", None)
        if section is None:
            section = getattr(cls, "_section", "")

        # normalize parameters
        if isinstance(fields, str):
            fields = fields.replace(",", " ").split()
        fields = tuple(map(str, fields))

        defaults = defaults or {}

        # ensure all keys in defaults can be found in fields
        for key in defaults:
            if key not in fields:
                raise TypeError(f"Key '{key}' in default dict not found in field names")

        cls._fields = fields
        cls._defaults = defaults
        cls._section = section

    def unmarshal_service(self, payload):
        loaded = self.from_payload(payload)
        for field in self._fields:
            setattr(self, field, getattr(loaded, field))

    @classmethod
    def from_payload(cls, payload):
        if not isinstance(payload, dict):
            raise BindingError(
                f"Service payload should be a mapping, got '{type(payload).__name__}'"
            )

        values = payload
        if cls._section:
            if cls._section not in payload:
                raise missing_field_error(cls._section)
            values = payload[cls._section]
            if not isinstance(values, dict):
                raise BindingError(
                    f"'{cls._section}' should be a mapping, "
                    f"got '{type(values).__name__}'"
                )

        return cls(**{k: v for k, v in values.items() if k in cls._fields})

    @classmethod
    def load(cls, env, name):
        """Create an item from the service called `name` in `env`."""
        item = cls.__new__(cls)
        return env.load_service(item, name)

    def copy(self):
        new_obj = self.__class__.__new__(self.__class__)
        for field in self._fields:
            setattr(new_obj, field, getattr(self, field))
        return new_obj

    def to_dict(self):
        return {field: getattr(self, field) for field in self._fields}

    def __eq__(self, value):
        if self.__class__ != value.__class__:
            return False

        return super().__eq__(value)

    def __ne__(self, value):
        return not self == value

    def __repr__(self):
        arg_list = ", ".join(f"{k}={getattr(self, k)!r}" for k in self._fields)
        return f"{type(self).__name__}({arg_list})"

