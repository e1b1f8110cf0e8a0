from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

from .errors import InvalidDeckInput

if TYPE_CHECKING:
    from .config import CodecConfig

# Key names are fixed by the game client and must not follow Python naming.
NAME_KEY = "Name"
CARDS_KEY = "Cards"
CARD_ID_KEY = "CardDefId"


@dataclass(frozen=True)
class Card:
    """A single card reference, identified by its card definition id."""

    name: str

    def to_dict(self) -> dict[str, str]:
        return {CARD_ID_KEY: self.name}

    @classmethod
    def from_dict(cls, data: Any, *, strict_keys: bool = False) -> "Card":
        if not isinstance(data, dict):
            raise InvalidDeckInput(f"card entry must be an object, got {_json_type(data)}")
        if CARD_ID_KEY not in data:
            raise InvalidDeckInput(f"card entry is missing {CARD_ID_KEY!r}")
        card_id = data[CARD_ID_KEY]
        if not isinstance(card_id, str):
            raise InvalidDeckInput(
                f"{CARD_ID_KEY!r} must be a string, got {_json_type(card_id)}"
            )
        if strict_keys:
            _reject_unknown_keys(data, {CARD_ID_KEY}, "card entry")
        return cls(name=card_id)


@dataclass
class DeckList:
    """A named, ordered list of cards that can be shared as a deck code.

    Card identifiers are opaque: the card pool changes too often for this
    package to track which ids exist in the game.
    """

    name: str = ""
    cards: list[Card] = field(default_factory=list)

    def set_name(self, name: str) -> None:
        self.name = str(name)

    def set_cards(self, cards: Iterable[Union[str, Card]]) -> None:
        """Replace the card list, keeping order and duplicates."""

        self.cards = [card if isinstance(card, Card) else Card(str(card)) for card in cards]

    def card_names(self) -> list[str]:
        return [card.name for card in self.cards]

    def to_dict(self) -> dict[str, Any]:
        return {
            NAME_KEY: self.name,
            CARDS_KEY: [card.to_dict() for card in self.cards],
        }

    @classmethod
    def from_dict(cls, data: Any, *, strict_keys: bool = False) -> "DeckList":
        """Build a deck from its structured-text form.

        ``Name`` and ``Cards`` are required and matched case-sensitively.
        Other keys are ignored unless ``strict_keys`` is set.
        """

        if not isinstance(data, dict):
            raise InvalidDeckInput(f"deck must be an object, got {_json_type(data)}")
        for key in (NAME_KEY, CARDS_KEY):
            if key not in data:
                raise InvalidDeckInput(f"deck is missing {key!r}")

        name = data[NAME_KEY]
        if not isinstance(name, str):
            raise InvalidDeckInput(f"{NAME_KEY!r} must be a string, got {_json_type(name)}")
        entries = data[CARDS_KEY]
        if not isinstance(entries, list):
            raise InvalidDeckInput(f"{CARDS_KEY!r} must be an array, got {_json_type(entries)}")
        if strict_keys:
            _reject_unknown_keys(data, {NAME_KEY, CARDS_KEY}, "deck")

        cards = [Card.from_dict(entry, strict_keys=strict_keys) for entry in entries]
        return cls(name=name, cards=cards)

    def to_code(self) -> str:
        from .codec import encode

        return encode(self)

    @classmethod
    def from_code(
        cls, code: Union[str, bytes], config: Optional["CodecConfig"] = None
    ) -> "DeckList":
        from .codec import decode

        deck = decode(code, config)
        return cls(name=deck.name, cards=deck.cards)


def _reject_unknown_keys(data: dict, allowed: set[str], what: str) -> None:
    unknown = sorted(key for key in data if key not in allowed)
    if unknown:
        raise InvalidDeckInput(f"{what} has unknown keys: {', '.join(unknown)}")


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
