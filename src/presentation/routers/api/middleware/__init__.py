"""Request middleware and FastAPI dependencies (trace id, identity, access policy)."""
