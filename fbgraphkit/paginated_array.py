"""Walks Graph API responses that are split into pages."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from fbgraphkit.http_manager import HttpManager
from fbgraphkit.result import GraphError, Result

ObjectFactory = Callable[[str], Any]

_BAD_CALL = "Invalid SDK call: no current page"
_BAD_OBJECT = "Response could not be turned into objects"


def _stringify(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class Paging:
    """Links to the neighbouring pages of a paged response."""

    next: str | None = None
    previous: str | None = None

    @classmethod
    def from_json(cls, text: str) -> Paging | None:
        """Parse a Graph ``paging`` object; ``None`` if it is not one."""
        try:
            data = json.loads(text)
        except (TypeError, json.JSONDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        nxt = data.get("next")
        prev = data.get("previous")
        return cls(
            next=nxt if isinstance(nxt, str) else None,
            previous=prev if isinstance(prev, str) else None,
        )


def _objects_from_json_array(values: list[Any], factory: ObjectFactory) -> tuple[Any, ...]:
    items = []
    for value in values:
        item = factory(_stringify(value))
        if item is None:
            raise ValueError(_BAD_OBJECT)
        items.append(item)
    return tuple(items)


class PaginatedArray:
    """Fetches a paged Graph endpoint one page at a time.

    Each element of a page's ``data`` array is turned into an object by
    ``object_factory``, which receives the element's JSON text.
    """

    def __init__(
        self,
        request: str,
        parameters: Mapping[str, Any] | None,
        object_factory: ObjectFactory,
    ) -> None:
        self._request = request
        self._parameters: dict[str, Any] = dict(parameters) if parameters is not None else {}
        self._object_factory = object_factory
        self._current: tuple[Any, ...] | None = None
        self._current_data_string: str | None = None
        self._paging: Paging | None = None

    @property
    def current(self) -> tuple[Any, ...]:
        """Objects of the most recently fetched page."""
        if self._current is None:
            raise ValueError(_BAD_CALL)
        return self._current

    @property
    def current_data_string(self) -> str:
        """Raw JSON text of the most recent page's ``data`` array."""
        if self._current is None:
            raise ValueError(_BAD_CALL)
        return self._current_data_string  # type: ignore[return-value]

    @property
    def has_current(self) -> bool:
        return self._current is not None

    @property
    def has_next(self) -> bool:
        return self._paging is not None and self._paging.next is not None

    @property
    def has_previous(self) -> bool:
        return self._paging is not None and self._paging.previous is not None

    async def first(self) -> Result | None:
        """Fetch the first page."""
        return await self._get_page(self._request)

    async def next(self) -> Result | None:
        """Fetch the following page, or return an error result if there is none."""
        if not self.has_next:
            return Result(GraphError(0, "Invalid SDK call", "No next page"))
        return await self._get_page(self._paging.next)  # type: ignore[union-attr]

    async def previous(self) -> Result | None:
        """Fetch the preceding page, or return an error result if there is none."""
        if not self.has_previous:
            return Result(GraphError(0, "Invalid SDK call", "No previous page"))
        return await self._get_page(self._paging.previous)  # type: ignore[union-attr]

    def object_array_from_web_response(
        self, response: str, class_factory: ObjectFactory
    ) -> tuple[Any, ...] | None:
        """Objects built from the ``data`` array of ``response``, if it has one."""
        try:
            root = json.loads(response)
        except (TypeError, json.JSONDecodeError):
            return None
        if not isinstance(root, dict):
            return None
        result = None
        for key, value in root.items():
            if key == "data" and isinstance(value, list):
                result = _objects_from_json_array(value, class_factory)
        return result

    async def _get_page(self, path: str) -> Result | None:
        response = await HttpManager.instance().get(path, dict(self._parameters))
        if response is None:
            return Result(GraphError(0, "HTTP request failed", "unable to receive response"))
        return self._consume_paged_response(response)

    def _consume_paged_response(self, text: str) -> Result | None:
        """Turn a page's JSON into a result; ``None`` if the text is not JSON.

        A Graph error object yields an unsuccessful result rather than raising.
        """
        try:
            root = json.loads(text)
        except json.JSONDecodeError:
            return None

        found_data = False
        if isinstance(root, dict):
            for key, value in root.items():
                if key == "error":
                    return Result(GraphError.from_json(_stringify(value)))
                if key == "paging":
                    paging = Paging.from_json(_stringify(value))
                    if paging is not None:
                        self._paging = paging
                elif key == "data":
                    if not isinstance(value, list):
                        raise ValueError(_BAD_OBJECT)
                    self._current_data_string = _stringify(value)
                    self._current = _objects_from_json_array(value, self._object_factory)
                    found_data = True

        # Everything may fit on one page, so paging is optional; data is not.
        if not found_data:
            raise ValueError(_BAD_OBJECT)
        return Result(self._current)