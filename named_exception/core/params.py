"""
Read-only parameter store for named exception messages.

Message formatters read the caller's context through these operations:

- ``get_param(*keys, last=False)``: one value, a tuple of values, or the
  value of the last key requested
- ``all_params()``: ``(key, value)`` pairs
- ``param_keys()`` / ``param_values()``
- ``param_exists(key)`` / ``param_is_defined(key)``
- ``params_is_empty()``
- ``validate(model)``: check the whole store against a pydantic model
"""

from __future__ import annotations

from collections.abc import KeysView, Mapping
from typing import Any, Dict, Iterator, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class MessageParams(Mapping):
    """Immutable mapping of string keys to arbitrary values.

    The source mapping is copied, so later changes to it are not seen here.
    """

    __slots__ = ("_params",)

    def __init__(self, params: Optional[Mapping[str, Any]] = None):
        self._params: Dict[str, Any] = dict(params or {})

    def __getitem__(self, key: str) -> Any:
        return self._params[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"MessageParams({self._params!r})"

    def get_param(self, *keys: str, last: bool = False) -> Any:
        """Return the value (or values) stored under ``keys``.

        Args:
            *keys: One or more keys; every one must be present
            last: Return only the value of the last key requested

        Returns:
            The value for a single key, otherwise a tuple in request order

        Raises:
            TypeError: If no key is given
            KeyError: If a key is absent
        """
        if not keys:
            raise TypeError("get_param() requires at least one key")
        values = tuple(self._params[key] for key in keys)
        if last or len(values) == 1:
            return values[-1]
        return values

    def all_params(self) -> List[Tuple[str, Any]]:
        return list(self._params.items())

    def param_keys(self) -> KeysView:
        return self._params.keys()

    def param_values(self) -> List[Any]:
        return list(self._params.values())

    def param_exists(self, key: str) -> bool:
        return key in self._params

    def param_is_defined(self, key: str) -> bool:
        """True when ``key`` is present and its value is not ``None``."""
        return self._params.get(key) is not None

    def params_is_empty(self) -> bool:
        return not self._params

    def validate(self, model: Type[ModelT]) -> ModelT:
        """Validate the parameters against a pydantic model.

        Raises:
            pydantic.ValidationError: If the parameters do not fit ``model``
        """
        return model.model_validate(self._params)


__all__ = ["MessageParams"]
