"""Card ID grammar, chat-message triage and deck tallies."""

import logging
import re

from kcgdeck.deckcode import MARKER, decode
from kcgdeck.deckcode.policies import DEFAULT_DIGIT_TRIM_POLICY, DEFAULT_PADDING_POLICY

logger = logging.getLogger(__name__)

CARD_ID_PATTERN = re.compile(r"^(ex|prm|[A-R])([ASMD])-([1-9]|[1-4][0-9]|50)$")

# Messages with this many slashes are read as a plain "id/id/id" list
SLASH_LIST_THRESHOLD = 20


def is_valid_card_id(card_id: str) -> bool:
    return CARD_ID_PATTERN.match(card_id) is not None


def split_card_id(card_id: str) -> tuple[str, str, int]:
    """Split a card ID into (set, type, number).

    Raises:
        ValueError: If the ID does not match the card ID grammar
    """
    m = CARD_ID_PATTERN.match(card_id)
    if not m:
        raise ValueError(f"Invalid card ID: {card_id!r}")
    return m.group(1), m.group(2), int(m.group(3))


def is_deck_code(text: str) -> bool:
    return text.startswith(MARKER)


def is_slash_list(text: str) -> bool:
    return text.count("/") >= SLASH_LIST_THRESHOLD


def cards_from_message(
    text: str,
    *,
    padding: str = DEFAULT_PADDING_POLICY,
    digit_trim: str = DEFAULT_DIGIT_TRIM_POLICY,
) -> list[str] | None:
    """Extract card IDs from a chat message.

    Deck codes are decoded; long slash-separated lists are split as-is.

    Returns:
        List of card IDs, or None if the message is neither form

    Raises:
        DeckCodeError: If the message is a deck code that cannot be decoded
    """
    if is_deck_code(text):
        logger.info(f"Decoding deck code: {text}")
        return decode(text, padding=padding, digit_trim=digit_trim)
    if is_slash_list(text):
        logger.info(f"Reading card list: {text}")
        return text.split("/")
    return None


def tally(card_ids: list[str], valid_only: bool = True) -> dict[str, int]:
    """Count card IDs, keeping first-seen order."""
    counts: dict[str, int] = {}
    for card_id in card_ids:
        if valid_only and not is_valid_card_id(card_id):
            continue
        counts[card_id] = counts.get(card_id, 0) + 1
    return counts
