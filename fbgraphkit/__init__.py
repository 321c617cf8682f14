"""Helpers for a social graph HTTP API: results, permissions, media, URIs, paging and HTTP dispatch."""

__version__ = "0.1.0"