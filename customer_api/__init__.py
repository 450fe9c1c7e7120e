"""
Top‑level package for the Customer API.

The web application lives under ``app`` (importable as
``customer_api.app.main``) and a small HTTP client for the same API
lives in ``customer_api.client``.  Nothing is re‑exported here so that
importing the client does not build the application.
"""

__all__ = []
