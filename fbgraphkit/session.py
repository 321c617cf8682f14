"""Process-wide configuration of how the SDK talks to Facebook."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, ClassVar
from urllib.parse import urlsplit

DEFAULT_API_MAJOR_VERSION = 2
DEFAULT_API_MINOR_VERSION = 1
DEFAULT_WEB_VIEW_REDIRECT_DOMAIN = "https://www.facebook.com"
DEFAULT_WEB_VIEW_REDIRECT_PATH = "/connect/login_success.html"


class SessionDefaultAudience(IntEnum):
    """Default audience for sharing."""

    NONE = 0
    ONLY_ME = 10
    FRIENDS = 20
    EVERYONE = 30


class SessionLoginBehavior(Enum):
    """How a login attempt is carried out."""

    WEB_VIEW = 0
    WEB_AUTH = 1
    WEB_ACCOUNT_PROVIDER = 2
    DEFAULT_ORDERING = 3
    SILENT = 4


class Session:
    """Holds app ids, the access token, the API version and redirect settings.

    One shared instance is reached through :meth:`active`.
    """

    _active: ClassVar[Session | None] = None

    def __init__(self) -> None:
        self.fb_app_id: str | None = None
        self.win_app_id: str | None = None
        self.access_token_data: Any = None
        self._app_response: str | None = None
        self._user: Any = None
        self._api_major_version = DEFAULT_API_MAJOR_VERSION
        self._api_minor_version = DEFAULT_API_MINOR_VERSION
        self._web_view_redirect_domain = DEFAULT_WEB_VIEW_REDIRECT_DOMAIN
        self._web_view_redirect_path = DEFAULT_WEB_VIEW_REDIRECT_PATH

    @classmethod
    def active(cls) -> Session:
        """The shared session, created on first use."""
        if cls._active is None:
            cls._active = cls()
        return cls._active

    @property
    def app_response(self) -> str | None:
        return self._app_response

    @property
    def logged_in(self) -> bool:
        return self.access_token_data is not None

    @property
    def user(self) -> Any:
        return self._user

    @property
    def api_major_version(self) -> int:
        return self._api_major_version

    @property
    def api_minor_version(self) -> int:
        return self._api_minor_version

    @property
    def web_view_redirect_domain(self) -> str:
        return self._web_view_redirect_domain

    @property
    def web_view_redirect_path(self) -> str:
        return self._web_view_redirect_path

    def set_api_version(self, major: int, minor: int) -> None:
        """Set the Graph API version used by most requests."""
        for name, value in (("major", major), ("minor", minor)):
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{name} version must be a non-negative integer: {value!r}")
        self._api_major_version = major
        self._api_minor_version = minor

    def set_web_view_redirect_url(self, domain: str | None, path: str | None) -> None:
        """Set the redirect domain and path; ``None`` keeps the current value."""
        if domain is not None:
            parts = urlsplit(domain)
            if not parts.scheme or not parts.netloc:
                raise ValueError(f"redirect domain must include the protocol: {domain!r}")
        if path is not None and not path.startswith("/"):
            raise ValueError(f"redirect path must start with '/': {path!r}")
        if domain is not None:
            self._web_view_redirect_domain = domain
        if path is not None:
            self._web_view_redirect_path = path