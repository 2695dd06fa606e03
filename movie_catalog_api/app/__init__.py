"""
Application package initializer.

The catalog is organised into the usual layers: ``core`` (settings,
logging, database pool and migrations, error handlers), ``schemas``
(request and response bodies), ``services`` (store operations) and
``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
