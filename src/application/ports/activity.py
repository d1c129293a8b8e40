"""Ports for collaborators around wallet mutations."""

from typing import Protocol


class ActivityNotifierPort(Protocol):
    """Port receiving human-readable activity messages.

    Delivery is fire-and-forget and never affects ledger state.
    """

    def publish(self, wallet_id: str, message: str) -> None:
        """Publish an activity message for a wallet."""


class IdGeneratorPort(Protocol):
    """Port minting opaque identifiers for ledger records."""

    def new_id(self, kind: str) -> str:
        """Return a new identifier for a record of the given kind."""


__all__ = ["ActivityNotifierPort", "IdGeneratorPort"]
