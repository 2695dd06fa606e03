"""
API package containing the HTTP routes.

The catalog API is unversioned; ``router.py`` aggregates the domain
routers from ``endpoints`` and is included by ``main.create_app``.
"""
