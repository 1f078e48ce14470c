"""
Deck sheet composer for KCG decks.

Lays the distinct cards of a deck out on a background sheet and writes the
copy count under each card. Grid density and background depend only on the
number of distinct cards.
"""
import io
import logging
from dataclasses import dataclass

from PIL import Image, ImageDraw

from kcgdeck.render.assets import AssetLibrary

logger = logging.getLogger(__name__)

# Sheet geometry (pixels)
LAYOUT = {
    "canvas_width": 3840,
    "padding_x": 241,
    "padding_y": 298,
    "gap_x": 13,
    "gap_y": 72,
    "two_rows_threshold": 20,       # sheet2.webp up to this many distinct cards
    "three_rows_threshold": 30,     # sheet.webp up to this many
    "canvas_height_two_rows": 1636,
    "canvas_height_three_rows": 2160,
    "card_small": (212, 296),       # more than three_rows_threshold distinct cards
    "card_large": (324, 452),
    "per_row_small": 15,
    "per_row_large": 10,
}

BACKGROUNDS = {
    "two_rows": "sheet2.webp",
    "three_rows": "sheet.webp",
    "no_grid": "sheet_nogrid.webp",
}

COUNT_FONT_SIZE = 36
COUNT_OFFSET_Y = 50
COUNT_X_RATIO = 0.46
COUNT_COLOR = "black"


@dataclass(frozen=True)
class SheetLayout:
    width: int
    height: int
    card_width: int
    card_height: int
    cards_per_row: int
    background: str


def layout_for(distinct: int) -> SheetLayout:
    """Pick canvas, card size and background for a number of distinct cards."""
    if distinct <= LAYOUT["two_rows_threshold"]:
        height = LAYOUT["canvas_height_two_rows"]
        background = BACKGROUNDS["two_rows"]
    else:
        height = LAYOUT["canvas_height_three_rows"]
        if distinct <= LAYOUT["three_rows_threshold"]:
            background = BACKGROUNDS["three_rows"]
        else:
            background = BACKGROUNDS["no_grid"]

    if distinct <= LAYOUT["three_rows_threshold"]:
        card_w, card_h = LAYOUT["card_large"]
        per_row = LAYOUT["per_row_large"]
    else:
        card_w, card_h = LAYOUT["card_small"]
        per_row = LAYOUT["per_row_small"]

    return SheetLayout(
        width=LAYOUT["canvas_width"],
        height=height,
        card_width=card_w,
        card_height=card_h,
        cards_per_row=per_row,
        background=background,
    )


def _baseline_offset(font) -> int:
    # Counts are positioned by baseline, Pillow draws from the top
    if hasattr(font, "getmetrics"):
        return font.getmetrics()[0]
    return 0


def render_deck_sheet(counts: dict[str, int], assets: AssetLibrary) -> Image.Image:
    """
    Compose a deck sheet image.

    Args:
        counts: Ordered mapping of card ID to copy count
        assets: Asset library providing background, card images and font

    Returns:
        RGB image of the sheet

    Raises:
        ValueError: If counts is empty
        AssetError: If the background cannot be loaded
    """
    if not counts:
        raise ValueError("Cannot render an empty deck")

    layout = layout_for(len(counts))
    logger.info(f"Rendering {len(counts)} distinct card(s) on {layout.background}")
    background = assets.background(layout.background)
    sheet = background.resize((layout.width, layout.height), Image.Resampling.LANCZOS)

    draw = ImageDraw.Draw(sheet)
    font = assets.font(COUNT_FONT_SIZE)
    baseline = _baseline_offset(font)

    x = LAYOUT["padding_x"]
    y = LAYOUT["padding_y"]
    cards_in_row = 0

    for card_id, count in counts.items():
        card = assets.card_image(card_id)
        if card is None:
            continue

        card_resized = card.resize((layout.card_width, layout.card_height), Image.Resampling.LANCZOS)
        sheet.paste(card_resized, (x, y), card_resized)

        text_x = x + layout.card_width * COUNT_X_RATIO
        text_y = y + layout.card_height + COUNT_OFFSET_Y - baseline
        draw.text((text_x, text_y), str(count), font=font, fill=COUNT_COLOR)

        x += layout.card_width + LAYOUT["gap_x"]
        cards_in_row += 1

        if cards_in_row >= layout.cards_per_row:
            x = LAYOUT["padding_x"]
            y += layout.card_height + LAYOUT["gap_y"]
            cards_in_row = 0

    return sheet


def sheet_to_jpeg(image: Image.Image, quality: int = 90) -> bytes:
    buf = io.BytesIO()
    image.convert("RGB").save(buf, "JPEG", quality=quality)
    return buf.getvalue()
