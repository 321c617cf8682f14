from urllib.parse import parse_qsl, urlsplit

import pytest

from fbgraphkit.graph_uri import GraphUriBuilder
from fbgraphkit.session import Session


@pytest.fixture(autouse=True)
def default_version():
    session = Session.active()
    saved = (session.api_major_version, session.api_minor_version)
    session.set_api_version(2, 1)
    yield session
    session.set_api_version(*saved)


def test_relative_path_gets_default_domain_and_version():
    assert GraphUriBuilder("me", None).make_uri() == "https://graph.facebook.com/v2.1/me"


def test_gaming_domain():
    assert GraphUriBuilder("me", "gaming").make_uri() == "https://graph.fb.gg/v2.1/me"


def test_extra_slashes_removed():
    uri = GraphUriBuilder("/me//friends/", None).make_uri()
    assert uri == "https://graph.facebook.com/v2.1/me/friends"


def test_version_in_path_is_kept_once():
    uri = GraphUriBuilder("v2.5/me", None).make_uri()
    assert uri == "https://graph.facebook.com/v2.5/me"
    assert uri.count("v2.") == 1


def test_session_version_used(default_version):
    default_version.set_api_version(3, 2)
    assert GraphUriBuilder("me", None).make_uri().endswith("/v3.2/me")


def test_absolute_uri_keeps_host_and_query():
    uri = GraphUriBuilder("https://graph.facebook.com/v2.5/me?fields=id", None).make_uri()
    assert uri == "https://graph.facebook.com/v2.5/me?fields=id"


def test_query_params_escaped_and_round_trip():
    builder = GraphUriBuilder("me", None)
    builder.add_query_param("q", "a b&c")
    uri = builder.make_uri()
    assert "q=a%20b%26c" in uri
    assert dict(parse_qsl(urlsplit(uri).query)) == {"q": "a b&c"}


def test_add_query_param_replaces_existing():
    builder = GraphUriBuilder("me?fields=id", None)
    builder.add_query_param("fields", "name")
    assert dict(parse_qsl(urlsplit(builder.make_uri()).query)) == {"fields": "name"}


def test_request_host_overrides_host():
    builder = GraphUriBuilder("me", None)
    builder.add_query_param("request_host", "localhost")
    parts = urlsplit(builder.make_uri())
    assert parts.netloc == "localhost"
    assert parts.path == "/v2.1/me"