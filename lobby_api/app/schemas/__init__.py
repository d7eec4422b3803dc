"""
Pydantic schema definitions for API payloads.

Schemas are separated from the repositories so that the JSON shape
(camelCase keys, identifiers as strings) is decoupled from the column
layout of the database.
"""
