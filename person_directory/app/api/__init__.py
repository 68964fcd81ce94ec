"""
API package.

``router`` exposes a top-level router which includes the routers of
every module in ``endpoints``.
"""
