"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the SQL in ``services`` so the column
names of the ``individuos`` table never leak into the API.
"""
