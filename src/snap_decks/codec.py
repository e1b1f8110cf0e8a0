"""Conversion between :class:`DeckList` values and shareable deck codes.

A deck code is the compact JSON form of a deck, UTF-8 encoded, then
encoded as standard Base64 with the ``=`` padding removed::

    {"Name":"Thanos","Cards":[{"CardDefId":"AntMan"}, ...]}
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Optional, Union

from .config import CodecConfig
from .deck import DeckList
from .errors import DecodingError, EncodingError, InvalidDeckInput


logger = logging.getLogger(__name__)

_ALPHABET = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/")
_PAD = ord("=")


def encode(deck: DeckList) -> str:
    """Convert ``deck`` into a code that can be pasted into the game."""

    try:
        _require_text(deck)
        text = json.dumps(
            deck.to_dict(),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
        payload = text.encode("utf-8")
    except (AttributeError, TypeError, ValueError) as exc:
        logger.error("Failed to serialize deck %r: %s", deck.name, exc)
        raise EncodingError() from exc

    return b64encode_nopad(payload)


def decode(code: Union[str, bytes], config: Optional[CodecConfig] = None) -> DeckList:
    """Convert a code copied from the game into a :class:`DeckList`.

    Raises :class:`DecodingError` when ``code`` is not unpadded Base64 and
    :class:`InvalidDeckInput` when it decodes to something other than a deck.
    """

    config = config or CodecConfig()
    # lone surrogates become non-alphabet bytes and fail the Base64 stage
    data = code.encode("utf-8", "surrogatepass") if isinstance(code, str) else bytes(code)
    if config.strip_whitespace:
        data = data.strip()

    try:
        payload = b64decode_nopad(data)
    except DecodingError as exc:
        logger.debug("Rejected deck code: %s", exc)
        raise

    try:
        return _parse_deck(payload, strict_keys=config.strict_keys)
    except InvalidDeckInput as exc:
        logger.debug("Rejected deck payload: %s", exc)
        raise


def b64encode_nopad(payload: bytes) -> str:
    return base64.b64encode(payload).rstrip(b"=").decode("ascii")


def b64decode_nopad(data: bytes) -> bytes:
    """Decode standard Base64 that must carry no padding.

    Only canonical encodings are accepted: the unused low bits of the final
    symbol must be zero.
    """

    for offset, byte in enumerate(data):
        if byte == _PAD:
            raise DecodingError("invalid padding", offset)
        if byte not in _ALPHABET:
            raise DecodingError(f"invalid byte {byte:#04x}", offset)

    if len(data) % 4 == 1:
        raise DecodingError("invalid length")

    padded = data + b"=" * (-len(data) % 4)
    try:
        payload = base64.b64decode(padded, validate=True)
    except binascii.Error as exc:
        raise DecodingError(str(exc)) from exc

    if b64encode_nopad(payload).encode("ascii") != data:
        raise DecodingError("invalid last symbol", len(data) - 1)
    return payload


def _parse_deck(payload: bytes, *, strict_keys: bool) -> DeckList:
    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidDeckInput("payload is not UTF-8 text") from exc

    try:
        data = json.loads(
            text,
            object_pairs_hook=_unique_keys,
            parse_constant=_reject_constant,
        )
    except InvalidDeckInput:
        raise
    except json.JSONDecodeError as exc:
        raise InvalidDeckInput(f"malformed JSON ({exc.msg} at position {exc.pos})") from exc
    except RecursionError as exc:
        raise InvalidDeckInput("malformed JSON (nesting too deep)") from exc
    except ValueError as exc:
        # e.g. integer literals beyond the int conversion digit limit
        raise InvalidDeckInput(f"malformed JSON ({exc})") from exc

    return DeckList.from_dict(data, strict_keys=strict_keys)


def _reject_constant(name: str) -> float:
    raise InvalidDeckInput(f"malformed JSON (unsupported constant {name})")


def _unique_keys(pairs: list[tuple[str, object]]) -> dict[str, object]:
    result: dict[str, object] = {}
    for key, value in pairs:
        if key in result:
            raise InvalidDeckInput(f"duplicate key {key!r}")
        result[key] = value
    return result


def _require_text(deck: DeckList) -> None:
    if not isinstance(deck.name, str):
        raise TypeError(f"deck name must be str, not {type(deck.name).__name__}")
    for card in deck.cards:
        if not isinstance(card.name, str):
            raise TypeError(f"card id must be str, not {type(card.name).__name__}")
