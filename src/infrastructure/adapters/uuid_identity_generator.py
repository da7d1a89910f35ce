"""UUID identity generator.

Production implementation of IdentityGeneratorProtocol backed by
random UUID4 values.
"""

from __future__ import annotations

from uuid import uuid4

from src.application.ports.identity_generator import IdentityGeneratorProtocol


class UUIDIdentityGenerator(IdentityGeneratorProtocol):
    """Generates task identities as UUID4 strings."""

    def new_id(self) -> str:
        """Return a new random UUID4 string."""
        return str(uuid4())
