from __future__ import annotations

import pytest

from snap_decks.deck import DeckList

THANOS_CARDS = [
    "AntMan",
    "Agent13",
    "Quinjet",
    "Angela",
    "Okoye",
    "Armor",
    "Falcon",
    "Mystique",
    "Lockjaw",
    "KaZar",
    "DevilDinosaur",
    "Thanos",
]

THANOS_CODE = (
    "eyJOYW1lIjoiVGhhbm9zIiwiQ2FyZHMiOlt7IkNhcmREZWZJZCI6IkFudE1hbiJ9LHsiQ2FyZERlZklkIjoiQWdlbnQxMyJ9"
    "LHsiQ2FyZERlZklkIjoiUXVpbmpldCJ9LHsiQ2FyZERlZklkIjoiQW5nZWxhIn0seyJDYXJkRGVmSWQiOiJPa295ZSJ9LHsi"
    "Q2FyZERlZklkIjoiQXJtb3IifSx7IkNhcmREZWZJZCI6IkZhbGNvbiJ9LHsiQ2FyZERlZklkIjoiTXlzdGlxdWUifSx7IkNh"
    "cmREZWZJZCI6IkxvY2tqYXcifSx7IkNhcmREZWZJZCI6IkthWmFyIn0seyJDYXJkRGVmSWQiOiJEZXZpbERpbm9zYXVyIn0s"
    "eyJDYXJkRGVmSWQiOiJUaGFub3MifV19"
)


@pytest.fixture()
def thanos_deck() -> DeckList:
    deck = DeckList()
    deck.set_name("Thanos")
    deck.set_cards(THANOS_CARDS)
    return deck


@pytest.fixture()
def thanos_code() -> str:
    return THANOS_CODE
