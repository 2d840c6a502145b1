"""Security adapters.

Exports:
    IdentityTokenVerifier: Verifies identity provider access tokens
"""

from src.infrastructure.security.identity_token_verifier import (
    IdentityTokenVerifier,
)

__all__ = ["IdentityTokenVerifier"]
