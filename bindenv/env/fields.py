"""
fields turns presence checks into a single FieldMissingError.
"""
from .error import FieldMissingError

__all__ = (
    "Fields",
    "check_all_fields",
    "missing_field_error",
)


# Maps a field name to whether the caller found it present.
Fields = dict[str, bool]


def check_all_fields(fields):
    """Raise FieldMissingError listing every field whose flag is false.

    Nothing happens when all flags are true or `fields` is empty.
    """
    missing = [name for name, present in fields.items() if not present]
    if missing:
        raise FieldMissingError(missing)


def missing_field_error(field):
    return FieldMissingError([field])
