"""
Top‑level package for the ToDo List API.

This file makes ``todolist_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``todolist_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
