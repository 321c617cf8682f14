"""Shared entry point for the HTTP requests the SDK makes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Protocol, runtime_checkable


@runtime_checkable
class HttpClient(Protocol):
    """What an HTTP backend must provide to carry Graph requests."""

    async def get(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        """Send a GET request and return the response body."""
        ...

    async def post(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        """Send a POST request and return the response body."""
        ...

    async def delete(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        """Send a DELETE request and return the response body."""
        ...

    def parameters_to_query_string(self, parameters: Mapping[str, Any]) -> str:
        """Encode ``parameters`` as a URL query string."""
        ...


class HttpManager:
    """Forwards requests to a replaceable :class:`HttpClient`.

    One shared instance is reached through :meth:`instance`; tests and
    applications swap the backend with :meth:`set_http_client`.
    """

    _instance: ClassVar[HttpManager | None] = None

    def __init__(self, http_client: HttpClient | None = None) -> None:
        self._http_client = http_client

    @classmethod
    def instance(cls) -> HttpManager:
        """The shared manager, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def http_client(self) -> HttpClient | None:
        return self._http_client

    def set_http_client(self, http_client: HttpClient | None) -> None:
        """Replace the backend that carries requests."""
        self._http_client = http_client

    def _client(self) -> HttpClient:
        if self._http_client is None:
            raise RuntimeError("no HTTP client configured; call set_http_client first")
        return self._http_client

    async def get(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        return await self._client().get(path, parameters)

    async def post(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        return await self._client().post(path, parameters)

    async def delete(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        return await self._client().delete(path, parameters)

    def parameters_to_query_string(self, parameters: Mapping[str, Any]) -> str:
        return self._client().parameters_to_query_string(parameters)