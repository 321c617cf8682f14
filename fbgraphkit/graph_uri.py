"""Builds full Graph API request URIs."""

from __future__ import annotations

import re
from urllib.parse import parse_qsl, quote, urlsplit

from fbgraphkit.session import Session

_GRAPH_DOMAIN = "https://graph.facebook.com/"
_GAMING_DOMAIN = "https://graph.fb.gg/"
_API_VERSION_RE = re.compile(r".?(v\d\.\d)(.*)")


def _escape(text: str) -> str:
    return quote(text, safe="")


class GraphUriBuilder:
    """Turns a Graph path (relative or absolute) into a versioned request URI."""

    def __init__(self, path: str, graph_domain: str | None) -> None:
        parts = urlsplit(path)
        if not (parts.scheme and parts.netloc):
            domain = _GAMING_DOMAIN if graph_domain == "gaming" else _GRAPH_DOMAIN
            parts = urlsplit(domain + path)

        self._scheme = parts.scheme
        self._host = parts.hostname or ""
        self._path = "".join(f"/{token}" for token in parts.path.split("/") if token)
        self._api_version = ""
        self._query_params: dict[str, str] = {}

        self._build_api_version()
        for name, value in parse_qsl(parts.query, keep_blank_values=True):
            self._query_params[name] = value

    def _build_api_version(self) -> None:
        match = _API_VERSION_RE.fullmatch(self._path)
        if match:
            self._api_version = match.group(1)
            self._path = match.group(2)
            return
        session = Session.active()
        if session.api_major_version:
            self._api_version = (
                f"v{session.api_major_version}.{session.api_minor_version}"
            )

    def add_query_param(self, query: str, param: str) -> None:
        """Add or replace a query parameter."""
        self._query_params[query] = param

    def make_uri(self) -> str:
        """Assemble the full URI."""
        # A request_host parameter redirects the call to another host.
        if "request_host" in self._query_params:
            self._host = self._query_params["request_host"]
        uri = f"{self._scheme}://{self._host}/{self._api_version}{self._path}"
        if self._query_params:
            uri += "?" + "&".join(
                f"{_escape(key)}={_escape(str(value))}"
                for key, value in self._query_params.items()
            )
        return uri