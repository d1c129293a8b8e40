"""Database ports for the shared wallet ledger.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine holding wallet snapshots."""

    def get_wallet_engine(self) -> Engine:
        """Get the engine for the wallet database.

        Returns:
            Engine: SQLAlchemy engine connected to the wallet store.
        """


__all__ = ["DatabaseEnginePort"]
