"""
KCG deck code decoder.

Turns a deck code such as ``KCG-YDqME`` into the ordered list of card IDs
it describes, each repeated by its encoded count:

    >>> decode("KCG-YDqME")
    ['AA-11']

Pipeline:
1. Validate the marker and payload symbols
2. Read the padding descriptor and compute how many bits to trim
3. Expand the remaining symbols to a bit string and trim it
4. Read 10-bit two's-complement groups into 3-character digit tokens
5. Trim the digit string to a multiple of five
6. Expand each 5-digit chunk through the lookup tables

Only format problems raise. Chunks carrying unusable data are dropped.
"""

import logging
from dataclasses import dataclass

from kcgdeck.deckcode.alphabet import (
    MARKER,
    TABLE_A,
    TABLE_B,
    is_symbol,
    set_code,
    symbol_value,
    symbols_to_bits,
)
from kcgdeck.deckcode.errors import InvalidFormatError
from kcgdeck.deckcode.policies import (
    DEFAULT_DIGIT_TRIM_POLICY,
    DEFAULT_PADDING_POLICY,
    PLACEHOLDER,
    get_digit_trim_policy,
    get_padding_policy,
)

logger = logging.getLogger(__name__)

GROUP_BITS = 10
GROUP_RANGE = 1 << GROUP_BITS  # 1024
VALUE_OFFSET = 500
CHUNK_SIZE = 5

CARD_TYPES = {
    1: "A",
    2: "S",
    3: "M",
    4: "D",
}

MIN_NUMBER = 1
MAX_NUMBER = 50


@dataclass(frozen=True)
class DecodedEntry:
    """One surviving chunk: a card ID and the digit that selected its table."""

    card_id: str
    selector: int

    @property
    def count(self) -> int:
        return self.selector % 5


def validate(code: str) -> str:
    """Check the deck code format and return the payload after the marker."""
    if not code or not code.startswith(MARKER):
        raise InvalidFormatError(f"Deck code must start with '{MARKER}'")

    payload = code[len(MARKER):]
    if not payload:
        raise InvalidFormatError("Deck code payload is empty")

    for char in payload:
        if not is_symbol(char):
            raise InvalidFormatError(
                f"Deck code contains an invalid character: {char}", fragment=char
            )

    return payload


def padding_bits(descriptor: str, policy: str = DEFAULT_PADDING_POLICY) -> int:
    """Number of trailing padding bits announced by the descriptor symbol."""
    position = symbol_value(descriptor) + 1  # 1-64
    return get_padding_policy(policy)(position)


def assemble_bits(symbols: str, trim: int) -> str:
    """Bit string for the data symbols with `trim` padding bits removed."""
    bits = symbols_to_bits(symbols)
    if trim <= 0:
        return bits
    if trim >= len(bits):
        return ""
    return bits[:-trim]


def decode_group(group: str) -> str:
    """Decode one 10-bit group into its digit token.

    The group is a two's-complement value v; the token is 500 - v padded
    to three characters with placeholders.
    """
    value = int(group, 2)
    if group[0] == "1":
        value -= GROUP_RANGE

    n = VALUE_OFFSET - value
    if 0 <= n < 10:
        return PLACEHOLDER * 2 + str(n)
    elif 10 <= n < 100:
        return PLACEHOLDER + str(n)
    return str(n)


def bits_to_digits(bits: str) -> str:
    """Concatenate the tokens of every whole 10-bit group."""
    tokens = []
    for i in range(0, len(bits) - GROUP_BITS + 1, GROUP_BITS):
        tokens.append(decode_group(bits[i:i + GROUP_BITS]))
    return "".join(tokens)


def normalize_digits(digits: str, policy: str = DEFAULT_DIGIT_TRIM_POLICY) -> str:
    """Trim the digit string to a multiple of five and resolve placeholders."""
    remainder = len(digits) % CHUNK_SIZE
    if remainder:
        digits = get_digit_trim_policy(policy)(digits, remainder)

    digits = digits.replace(PLACEHOLDER, "0")
    if len(digits) % CHUNK_SIZE != 0:
        raise InvalidFormatError(
            "Final digit string length is not a multiple of 5", fragment=digits
        )
    return digits


def expand_chunk(chunk: str) -> DecodedEntry | None:
    """Expand a 5-digit chunk, or return None if its data is unusable."""
    if not chunk.isdigit():
        logger.debug(f"Skipping chunk {chunk}: not all digits")
        return None

    c1, c2, c3, c4, c5 = (int(c) for c in chunk)

    if 1 <= c5 <= 4:
        table = TABLE_A
    elif 6 <= c5 <= 9:
        table = TABLE_B
    else:
        logger.debug(f"Skipping chunk {chunk}: no table for selector {c5}")
        return None

    card_type = CARD_TYPES.get(c2)
    if card_type is None:
        logger.debug(f"Skipping chunk {chunk}: unknown type {c2}")
        return None

    number = c3 * 10 + c4
    if not MIN_NUMBER <= number <= MAX_NUMBER:
        logger.debug(f"Skipping chunk {chunk}: number {number} out of range")
        return None

    return DecodedEntry(f"{set_code(table[c1])}{card_type}-{number}", c5)


def decode_entries(
    code: str,
    *,
    padding: str = DEFAULT_PADDING_POLICY,
    digit_trim: str = DEFAULT_DIGIT_TRIM_POLICY,
) -> list[DecodedEntry]:
    """Decode a deck code into its surviving entries, in chunk order."""
    payload = validate(code)

    trim = padding_bits(payload[0], padding)
    bits = assemble_bits(payload[1:], trim)
    digits = normalize_digits(bits_to_digits(bits), digit_trim)

    entries = []
    for i in range(0, len(digits), CHUNK_SIZE):
        entry = expand_chunk(digits[i:i + CHUNK_SIZE])
        if entry is not None:
            entries.append(entry)
    return entries


def decode(
    code: str,
    *,
    padding: str = DEFAULT_PADDING_POLICY,
    digit_trim: str = DEFAULT_DIGIT_TRIM_POLICY,
) -> list[str]:
    """Decode a deck code into card IDs, each repeated by its count.

    Args:
        code: Full deck code including the ``KCG-`` marker
        padding: Padding-trim policy name (see ``PADDING_POLICIES``)
        digit_trim: Digit-trim policy name (see ``DIGIT_TRIM_POLICIES``)

    Returns:
        List of card IDs; empty when no chunk survives

    Raises:
        InvalidFormatError: If the code is not well-formed
        ValueError: If a policy name is unknown
    """
    cards = []
    for entry in decode_entries(code, padding=padding, digit_trim=digit_trim):
        cards.extend([entry.card_id] * entry.count)
    return cards
