"""
Service layer.

Each service encapsulates the rules for one resource: validation that
goes beyond the schema, existence and uniqueness checks, and the
mutation itself.  Services receive their repository in the constructor
so tests can hand them an in‑memory fake.
"""
