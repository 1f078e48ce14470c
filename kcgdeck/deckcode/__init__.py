"""KCG deck code decoding."""

from kcgdeck.deckcode.alphabet import ALPHABET, MARKER, TABLE_A, TABLE_B
from kcgdeck.deckcode.decoder import DecodedEntry, decode, decode_entries
from kcgdeck.deckcode.errors import DeckCodeError, InvalidFormatError
from kcgdeck.deckcode.policies import (
    DEFAULT_DIGIT_TRIM_POLICY,
    DEFAULT_PADDING_POLICY,
    DIGIT_TRIM_POLICIES,
    PADDING_POLICIES,
    PLACEHOLDER,
)

__all__ = [
    # alphabet.py
    "ALPHABET",
    "MARKER",
    "TABLE_A",
    "TABLE_B",
    # decoder.py
    "DecodedEntry",
    "decode",
    "decode_entries",
    # errors.py
    "DeckCodeError",
    "InvalidFormatError",
    # policies.py
    "DEFAULT_DIGIT_TRIM_POLICY",
    "DEFAULT_PADDING_POLICY",
    "DIGIT_TRIM_POLICIES",
    "PADDING_POLICIES",
    "PLACEHOLDER",
]
