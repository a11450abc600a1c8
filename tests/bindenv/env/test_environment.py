import pytest

from bindenv.env.environment import Environment, Source, UnmarshalService
from bindenv.env.error import ServiceNotFoundError


class RecordingService:
    """A load target that remembers every payload it was given."""

    def __init__(self, error=None):
        self.payloads = []
        self.error = error

    def unmarshal_service(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error


@pytest.fixture
def env():
    return Environment(
        Source.RAW,
        {
            "test": {"name": "Test", "credentials": {"url": "https://example.com"}},
            "portal-uaa": {"name": "portal-uaa"},
        },
    )


class Test_Source:
    def test_values(self):
        assert Source("file") is Source.FILE
        assert Source("environment") is Source.ENVIRONMENT
        assert Source("raw") is Source.RAW
        assert str(Source.ENVIRONMENT) == "environment"

    def test_unknown(self):
        with pytest.raises(ValueError):
            Source("network")


class Test_UnmarshalService:
    def test_duck_typed_target(self):
        assert isinstance(RecordingService(), UnmarshalService)

    def test_not_a_target(self):
        assert not isinstance(object(), UnmarshalService)
        assert not isinstance({"unmarshal_service": None}, UnmarshalService)


class Test_Environment:
    def test_init(self, env):
        assert env.source is Source.RAW
        assert set(env.services_by_name) == {"test", "portal-uaa"}
        assert len(env) == 2
        assert sorted(env) == ["portal-uaa", "test"]

    def test_read_only(self, env):
        with pytest.raises(TypeError):
            env.services_by_name["other"] = {}

        with pytest.raises(AttributeError):
            env.source = Source.FILE

    def test_copies_input_mapping(self):
        services = {"test": {"name": "test"}}
        env = Environment("file", services)
        services["other"] = {"name": "other"}

        assert env.source is Source.FILE
        assert "other" not in env

    def test_contains(self, env):
        for name in ("test", "TEST", "Test", "Portal-UAA"):
            assert name in env

        assert "unknown" not in env
        assert 1 not in env

    def test_get(self, env):
        payload = env.get("TEST")
        assert payload == env.services_by_name["test"]

        payload["credentials"]["url"] = "changed"
        assert env.services_by_name["test"]["credentials"]["url"] == (
            "https://example.com"
        )

        assert env.get("unknown") is None
        assert env.get("unknown", {}) == {}

    def test_load_service(self, env):
        for name in ("test", "TEST", "Test"):
            target = RecordingService()

            assert env.load_service(target, name) is target
            assert target.payloads == [env.services_by_name["test"]]

    def test_load_service_gets_a_copy(self, env):
        target = RecordingService()
        env.load_service(target, "test")
        target.payloads[0]["name"] = "changed"

        assert env.services_by_name["test"]["name"] == "Test"

    def test_load_service_not_found(self, env):
        target = RecordingService()

        with pytest.raises(ServiceNotFoundError) as excinfo:
            env.load_service(target, "nonexistent")

        assert excinfo.value.name == "nonexistent"
        assert target.payloads == []

    def test_load_service_error_passes_through(self, env):
        error = RuntimeError("cannot decode")
        target = RecordingService(error=error)

        with pytest.raises(RuntimeError) as excinfo:
            env.load_service(target, "test")

        assert excinfo.value is error

    def test_load_service_invalid_target(self, env):
        with pytest.raises(TypeError) as excinfo:
            env.load_service(object(), "test")

        assert "has no unmarshal_service method" in str(excinfo.value)

    def test_repr(self, env):
        assert repr(env) == "Environment(source='raw', services=[portal-uaa, test])"
