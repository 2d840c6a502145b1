"""Infrastructure layer - Adapters for domain protocols (ports).

Structure:
- authorization/: Casbin model/policy and the AccessPolicy loader
- persistence/: SQLAlchemy models, record stores and repositories
- audit/: Activity log adapter
- logging/: structlog console adapter
- security/: Identity token verifier (PyJWT)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
