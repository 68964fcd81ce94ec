"""
Top-level package for the Person Directory Service.

All functionality lives in submodules under ``app``; import the ASGI
application as ``person_directory.app.main:app``.
"""

__all__ = []
