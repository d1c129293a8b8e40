"""Identifier generation for wallet records."""

from uuid import uuid4

from src.application.ports.activity import IdGeneratorPort


class UuidIdGenerator(IdGeneratorPort):
    """Mint random UUID4 strings, whatever the record kind."""

    def new_id(self, kind: str) -> str:
        return str(uuid4())


__all__ = ["UuidIdGenerator"]
