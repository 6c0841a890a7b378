"""
API package containing versioned routes.

A version subpackage exposes a top‑level ``router`` which includes all
of its resource routers.  New versions can be added by creating a new
subpackage (e.g. ``v2``) with its own ``router``.
"""
