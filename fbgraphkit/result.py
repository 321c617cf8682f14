"""Outcome of a Graph API call: either a value or an error."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GraphError:
    """Error information returned by the Graph API or raised by the SDK."""

    code: int = 0
    type: str = ""
    message: str = ""

    @classmethod
    def from_json(cls, text: str) -> GraphError:
        """Build an error from the JSON text of a Graph ``error`` object."""
        try:
            data = json.loads(text)
        except (TypeError, json.JSONDecodeError) as exc:
            raise ValueError(f"error object is not valid JSON: {text!r}") from exc
        if not isinstance(data, dict):
            raise ValueError("error JSON must be an object")
        code = data.get("code", 0)
        if not isinstance(code, int) or isinstance(code, bool):
            raise ValueError(f"error code must be an integer, got {code!r}")
        return cls(
            code=code,
            type=str(data.get("type", "")),
            message=str(data.get("message", "")),
        )


class Result:
    """Holds either a successful value or a :class:`GraphError`, never both.

    Passing a :class:`GraphError` makes the result unsuccessful; any other
    non-``None`` value makes it successful.
    """

    __slots__ = ("_value", "_error")

    def __init__(self, value: Any) -> None:
        if isinstance(value, GraphError):
            self._error: GraphError | None = value
            self._value: Any = None
        else:
            self._error = None
            self._value = value

    @property
    def succeeded(self) -> bool:
        return self._value is not None

    @property
    def value(self) -> Any:
        return self._value

    @property
    def error(self) -> GraphError | None:
        return self._error

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Result(error={self._error!r})"
        return f"Result(value={self._value!r})"