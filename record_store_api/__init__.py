"""
Top-level package for the Record Store API.

The package provides no public exports; the application lives in
``record_store_api.app`` and is importable as
``record_store_api.app.main:app``.
"""

__all__ = []
