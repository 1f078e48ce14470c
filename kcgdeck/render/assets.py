"""Card image, background and font loading for deck sheets."""

import logging
from pathlib import Path

from PIL import Image, ImageFont

from kcgdeck.config import Settings

logger = logging.getLogger(__name__)

CARD_SUFFIX = ".webp"


class AssetError(Exception):
    """A required asset could not be loaded."""
    pass


def _load_font(path: Path, size: int):
    """Try to load a TrueType font, falling back to Pillow's default."""
    if path.exists():
        try:
            return ImageFont.truetype(str(path), size)
        except OSError as e:
            logger.warning(f"Could not load font {path}: {e}")
    else:
        logger.warning(f"Font not found: {path}")

    return ImageFont.load_default(size=size)


class AssetLibrary:
    """Loads deck-sheet assets from disk, caching card images per instance."""

    def __init__(
        self,
        assets_dir: Path,
        cards_dir: Path | None = None,
        font_path: Path | None = None,
    ):
        """Initialize the library.

        Args:
            assets_dir: Directory holding the sheet backgrounds
            cards_dir: Directory of `<card_id>.webp` images (default: assets_dir/cards)
            font_path: TrueType font for count labels
        """
        self.assets_dir = Path(assets_dir)
        self.cards_dir = Path(cards_dir) if cards_dir else self.assets_dir / "cards"
        self.font_path = Path(font_path) if font_path else None
        self._cards: dict[str, Image.Image | None] = {}
        self._fonts: dict[int, object] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "AssetLibrary":
        return cls(settings.assets_dir, settings.cards_dir, settings.font_path)

    def background(self, name: str) -> Image.Image:
        """Load a sheet background by file name.

        Raises:
            AssetError: If the background is missing or unreadable
        """
        path = self.assets_dir / name
        try:
            with Image.open(path) as img:
                return img.convert("RGB")
        except OSError as e:
            raise AssetError(f"Failed to load background {path}: {e}") from e

    def card_path(self, card_id: str) -> Path:
        return self.cards_dir / f"{card_id}{CARD_SUFFIX}"

    def card_image(self, card_id: str) -> Image.Image | None:
        """Load a card image, or None if it does not exist."""
        if card_id in self._cards:
            return self._cards[card_id]

        path = self.card_path(card_id)
        image = None
        if not path.exists():
            logger.warning(f"Card image not found: {path}")
        else:
            try:
                with Image.open(path) as img:
                    image = img.convert("RGBA")
            except OSError as e:
                logger.warning(f"Failed to load card image {path}: {e}")

        self._cards[card_id] = image
        return image

    def font(self, size: int):
        if size not in self._fonts:
            if self.font_path is None:
                self._fonts[size] = ImageFont.load_default(size=size)
            else:
                self._fonts[size] = _load_font(self.font_path, size)
        return self._fonts[size]
