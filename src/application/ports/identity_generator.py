"""Identity generator protocol.

Task identities are generated by the application service before the
repository is called. Generation is injected through this port so tests
can supply deterministic identities.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IdentityGeneratorProtocol(Protocol):
    """Protocol for generating globally unique task identities."""

    def new_id(self) -> str:
        """Generate a fresh identity.

        Returns:
            A non-empty, globally unique identifier string.
        """
        ...
