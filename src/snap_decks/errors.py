from __future__ import annotations

from typing import Optional


class DeckListError(ValueError):
    """Base class for every failure raised while converting deck codes."""


class EncodingError(DeckListError):
    """The deck could not be serialized.

    This should not happen for decks built through the public setters and
    usually means a non-text value was placed on the record directly.
    """

    def __init__(self) -> None:
        super().__init__("Failed to encode bytes")


class DecodingError(DeckListError):
    """The code is not valid unpadded standard Base64."""

    def __init__(self, reason: str, offset: Optional[int] = None) -> None:
        self.reason = reason
        self.offset = offset
        detail = reason if offset is None else f"{reason} at offset {offset}"
        super().__init__(f"Failed to decode data as base64: {detail}")


class InvalidDeckInput(DeckListError):
    """The code decoded cleanly but does not describe a deck."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid data: {reason}")
