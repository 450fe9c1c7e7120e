"""
API package containing versioned routes.

A version subpackage (currently only ``v1``) exposes a top‑level
``router`` which includes all of its resource routers.
"""
