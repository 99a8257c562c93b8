"""
HTTP layer of the service.

``router.py`` aggregates the domain routers defined in ``endpoints``,
``deps.py`` provides request dependencies and ``error_handlers.py``
maps exceptions to JSON responses.
"""
