"""
Application package.

Contains the entrypoint for the API and its layers: ``core`` (settings,
logging, errors), ``schemas`` (pydantic payloads), ``services`` (the
record store) and ``api`` (routes and error handlers).
"""

from .main import app, create_app  # noqa: F401
