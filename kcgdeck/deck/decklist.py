#!/usr/bin/env python3
"""
KCG Decklist Export

Summarises a decoded deck into a decklist manifest and writes it as YAML
(or JSON for any other suffix).

Usage:
    python -m kcgdeck.deck.decklist <message> [output_path]
    python -m kcgdeck.deck.decklist KCG-YDqME deck/decklist.yml
"""

import json
import sys
from datetime import datetime
from pathlib import Path

import yaml

from kcgdeck.deck.cards import (
    cards_from_message,
    is_deck_code,
    is_valid_card_id,
    split_card_id,
    tally,
)


def generate_decklist(card_ids: list[str], code: str | None = None) -> dict:
    """Generate a decklist manifest from decoded card IDs."""
    counts = tally(card_ids)
    rejected = sorted({c for c in card_ids if not is_valid_card_id(c)})

    by_set: dict[str, int] = {}
    by_type: dict[str, int] = {}
    cards = []
    for card_id, count in counts.items():
        card_set, card_type, number = split_card_id(card_id)
        by_set[card_set] = by_set.get(card_set, 0) + count
        by_type[card_type] = by_type.get(card_type, 0) + count
        cards.append({
            'id': card_id,
            'set': card_set,
            'type': card_type,
            'number': number,
            'count': count,
        })

    return {
        'code': code,
        'generated': datetime.now().isoformat(),
        'total_cards': sum(counts.values()),
        'distinct_cards': len(counts),
        'by_set': by_set,
        'by_type': by_type,
        'cards': cards,
        'rejected': rejected,
    }


def save_decklist(decklist: dict, output_path: Path) -> Path:
    """Save the decklist to file, returning the path written."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix in ('.yml', '.yaml'):
        with open(output_path, 'w', encoding='utf-8') as f:
            yaml.dump(decklist, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
    else:
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(decklist, f, indent=2, ensure_ascii=False)

    return output_path


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    message = sys.argv[1]
    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else Path('decklist.yml')

    card_ids = cards_from_message(message)
    if card_ids is None:
        print(f"Error: not a deck code or card list: {message}")
        sys.exit(1)

    code = message if is_deck_code(message) else None
    decklist = generate_decklist(card_ids, code)
    saved_path = save_decklist(decklist, output_path)

    print(f"Decklist saved to: {saved_path}")
    print(f"Total: {decklist['total_cards']} cards ({decklist['distinct_cards']} distinct)")
    if decklist['rejected']:
        print(f"[WARN] {len(decklist['rejected'])} invalid card ID(s) ignored")


if __name__ == '__main__':
    main()
