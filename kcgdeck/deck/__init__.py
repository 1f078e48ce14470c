"""Message triage, tallies and decklists for decoded decks."""

from kcgdeck.deck.cards import (
    CARD_ID_PATTERN,
    cards_from_message,
    is_deck_code,
    is_slash_list,
    is_valid_card_id,
    split_card_id,
    tally,
)
from kcgdeck.deck.decklist import generate_decklist, save_decklist

__all__ = [
    # cards.py
    "CARD_ID_PATTERN",
    "cards_from_message",
    "is_deck_code",
    "is_slash_list",
    "is_valid_card_id",
    "split_card_id",
    "tally",
    # decklist.py
    "generate_decklist",
    "save_decklist",
]
