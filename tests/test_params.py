"""
Tests for the message parameter store and its access operations.
"""

import pytest
from pydantic import BaseModel, ValidationError

from myapp_error import MyAppError
from named_exception import ExceptionalException, MessageParams


@pytest.fixture
def params():
    """Parameter store with a defined, an undefined and a numeric value."""
    return MessageParams({"foo": "bar", "bang": None, "count": 3})


class TestGetParam:
    """Tests for get_param."""

    def test_single_key(self, params):
        assert params.get_param("foo") == "bar"

    def test_multiple_keys_in_request_order(self, params):
        assert params.get_param("count", "foo", "bang") == (3, "bar", None)

    def test_last_returns_value_of_last_key(self, params):
        assert params.get_param("foo", "bang", "count", last=True) == 3

    def test_requires_a_key(self, params):
        with pytest.raises(TypeError):
            params.get_param()

    def test_missing_key(self, params):
        with pytest.raises(KeyError):
            params.get_param("foo", "missing")

    def test_missing_key_on_exception_is_meta_error(self):
        """Verify the exception-level accessor raises the meta-error."""
        err = MyAppError(name="static_error", message_params={"foo": "bar"})

        with pytest.raises(ExceptionalException) as excinfo:
            err.get_param("foo", "missing")

        assert excinfo.value.name == "missing_message_param"
        assert excinfo.value.get_param("param") == "missing"

    def test_exception_accessor_multiple_keys(self):
        err = MyAppError(name="static_error", message_params={"a": 1, "b": 2})

        assert err.get_param("b", "a") == (2, 1)
        assert err.get_param("b", "a", last=True) == 1


class TestParamQueries:
    """Tests for the read-only query operations."""

    def test_all_params(self, params):
        assert sorted(params.all_params(), key=lambda pair: pair[0]) == [
            ("bang", None),
            ("count", 3),
            ("foo", "bar"),
        ]

    def test_param_keys(self, params):
        assert params.param_keys() == {"foo", "bang", "count"}

    def test_param_values(self, params):
        assert sorted(params.param_values(), key=repr) == sorted(
            ["bar", None, 3], key=repr
        )

    def test_param_exists(self, params):
        assert params.param_exists("bang") is True
        assert params.param_exists("missing") is False

    def test_param_is_defined(self, params):
        """Verify present-but-None differs from defined."""
        assert params.param_is_defined("foo") is True
        assert params.param_is_defined("bang") is False
        assert params.param_is_defined("missing") is False

    def test_params_is_empty(self, params):
        assert params.params_is_empty() is False
        assert MessageParams().params_is_empty() is True
        assert MessageParams({}).params_is_empty() is True

    def test_exception_delegates_queries(self):
        err = MyAppError(name="static_error", message_params={"foo": None})

        assert err.all_params() == [("foo", None)]
        assert set(err.param_keys()) == {"foo"}
        assert err.param_values() == [None]
        assert err.param_exists("foo") is True
        assert err.param_is_defined("foo") is False
        assert err.params_is_empty() is False
        assert MyAppError(name="static_error").params_is_empty() is True


class TestImmutability:
    """Tests that message params cannot change after construction."""

    def test_no_item_assignment(self, params):
        with pytest.raises(TypeError):
            params["foo"] = "baz"

    def test_source_mapping_is_copied(self):
        source = {"foo": "bar"}
        err = MyAppError(name="customized_error", message_params=source)

        source["foo"] = "changed"

        assert err.get_param("foo") == "bar"
        assert err.message == "Something happened to bar"

    def test_message_params_attribute_is_read_only(self):
        err = MyAppError(name="static_error")

        with pytest.raises(AttributeError):
            err.message_params = {"foo": "bar"}


class TestValidate:
    """Tests for pydantic validation of params."""

    class PathParams(BaseModel):
        path: str
        size: int = 0

    def test_validate_returns_model(self):
        model = MessageParams({"path": "/tmp/a", "size": "12"}).validate(self.PathParams)

        assert model.path == "/tmp/a"
        assert model.size == 12

    def test_validate_raises_validation_error(self):
        with pytest.raises(ValidationError):
            MessageParams({"size": "big"}).validate(self.PathParams)

    def test_exception_validate_params_raises_meta_error(self):
        err = MyAppError(name="static_error", message_params={"size": "big"})

        with pytest.raises(ExceptionalException) as excinfo:
            err.validate_params(self.PathParams)

        errors = excinfo.value.get_param("errors")
        assert "path: Field required" in errors
        assert any(error.startswith("size: ") for error in errors)
        assert isinstance(excinfo.value.__cause__, ValidationError)
