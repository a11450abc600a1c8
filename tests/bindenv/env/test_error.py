import pytest

from bindenv.env.error import (
    BindingError,
    CatalogError,
    FieldMissingError,
    ServiceNotFoundError,
)


class Test_BindingError:
    def test_no_meta(self):
        with pytest.raises(BindingError) as excinfo:
            raise BindingError("reason")

        assert str(excinfo.value) == "reason"

    def test_meta(self):
        with pytest.raises(BindingError) as excinfo:
            raise BindingError("reason", meta1="", meta2="meta2", meta3=1)

        assert str(excinfo.value) == "reason (meta2=meta2, meta3=1)"

    def test_only_empty_meta(self):
        assert str(BindingError("reason", meta1="", meta2=None)) == "reason"


class Test_ServiceNotFoundError:
    def test_message(self):
        err = ServiceNotFoundError("portal-uaa")

        assert err.name == "portal-uaa"
        assert str(err) == "service not found (name=portal-uaa)"

    def test_kind(self):
        err = ServiceNotFoundError("portal-uaa")

        assert isinstance(err, BindingError)
        assert isinstance(err, LookupError)
        assert not isinstance(err, FieldMissingError)


class Test_FieldMissingError:
    def test_message(self):
        err = FieldMissingError(["username", "password"])

        assert err.fields == ["username", "password"]
        assert str(err) == "field(s) missing: username, password"

    def test_empty_field_name(self):
        assert str(FieldMissingError([""])) == "field(s) missing: "


class Test_CatalogError:
    def test_is_value_error(self):
        with pytest.raises(ValueError):
            raise CatalogError("bad catalog", category="xsuaa")

    def test_meta(self):
        err = CatalogError("bad catalog", category="xsuaa")

        assert str(err) == "bad catalog (category=xsuaa)"
