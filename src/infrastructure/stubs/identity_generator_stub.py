"""Identity Generator Stub.

Deterministic implementation of IdentityGeneratorProtocol for tests.
By default it yields "task-0001", "task-0002", ...; a scripted sequence
can be supplied instead.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from src.application.ports.identity_generator import IdentityGeneratorProtocol


class IdentityGeneratorStub(IdentityGeneratorProtocol):
    """Deterministic identity generator.

    Attributes:
        issued: Every identity handed out so far, in order.
    """

    def __init__(
        self, ids: Optional[Iterable[str]] = None, prefix: str = "task"
    ) -> None:
        """Initialize the stub.

        Args:
            ids: Optional scripted identities, returned in order.
            prefix: Prefix for generated identities when no script is given.
        """
        self._scripted = list(ids) if ids is not None else None
        self._prefix = prefix
        self.issued: list[str] = []

    def new_id(self) -> str:
        """Return the next deterministic identity.

        Raises:
            RuntimeError: If a scripted sequence has been used up.
        """
        if self._scripted is not None:
            if len(self.issued) >= len(self._scripted):
                raise RuntimeError("IdentityGeneratorStub ran out of scripted ids")
            new_id = self._scripted[len(self.issued)]
        else:
            new_id = f"{self._prefix}-{len(self.issued) + 1:04d}"
        self.issued.append(new_id)
        return new_id
