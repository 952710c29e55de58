"""Browser-facing usage export for py_getenv.

This package provides a Flask application that serves a registry's
usage data over HTTP.  It is an **optional** extra. Install with::

    pip install py-getenv[web]

The ``create_app`` factory in ``app.py`` wraps an existing registry and
serves three read-only endpoints:

- ``GET /`` — plain-text usage.
- ``GET /api/usage`` — usage as JSON.
- ``GET /api/log`` — the registry's audit log as JSON.
"""
