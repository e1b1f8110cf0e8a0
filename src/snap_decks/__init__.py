"""Encode and decode Marvel Snap deck codes."""

from .codec import decode, encode
from .config import CodecConfig, load_config
from .deck import Card, DeckList
from .errors import DeckListError, DecodingError, EncodingError, InvalidDeckInput

__version__ = "0.1.0"

__all__ = [
    "Card",
    "CodecConfig",
    "DeckList",
    "DeckListError",
    "DecodingError",
    "EncodingError",
    "InvalidDeckInput",
    "__version__",
    "decode",
    "encode",
    "load_config",
]
