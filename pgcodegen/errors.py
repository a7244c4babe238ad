"""pgcodegen exceptions."""

from __future__ import annotations


class InvalidIdentifierError(ValueError):
    """A dotted name did not split into one, two, or three parts."""

    def __init__(self, name: str) -> None:
        super().__init__(f"invalid name: {name}")
        self.name = name
