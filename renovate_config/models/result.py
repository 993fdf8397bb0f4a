"""Models for credential verification results."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class VerificationResult:
    """Outcome of checking a record's token against its forge."""

    account: str
    accessible: Sequence[str]
    inaccessible: Sequence[str]

    @property
    def ok(self) -> bool:
        """Whether every configured repository is reachable with the token."""
        return not self.inaccessible
