"""Deck sheet rendering for KCG decks.

Exports are lazily loaded so the decoder can be used without Pillow
being imported.
"""

__all__ = [
    # assets.py
    "AssetError",
    "AssetLibrary",
    # sheet.py
    "LAYOUT",
    "BACKGROUNDS",
    "SheetLayout",
    "layout_for",
    "render_deck_sheet",
    "sheet_to_jpeg",
]


def __getattr__(name: str):
    """Lazy import for module exports."""
    if name in ("AssetError", "AssetLibrary"):
        from kcgdeck.render import assets
        return getattr(assets, name)
    elif name in ("LAYOUT", "BACKGROUNDS", "SheetLayout", "layout_for", "render_deck_sheet", "sheet_to_jpeg"):
        from kcgdeck.render import sheet
        return getattr(sheet, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
