"""Typed client library for the NetBox REST API."""

__version__ = "0.1.0"
