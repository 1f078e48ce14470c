"""Runtime settings loaded from environment variables and `.env`."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from kcgdeck.deckcode.policies import (
    DEFAULT_DIGIT_TRIM_POLICY,
    DEFAULT_PADDING_POLICY,
    get_digit_trim_policy,
    get_padding_policy,
)

DEFAULT_FONT_NAME = "ShipporiMincho-Bold.ttf"
DEFAULT_PORT = 3000


@dataclass
class Settings:
    """Paths and decoder options shared by the CLI and the server."""

    assets_dir: Path
    cards_dir: Path
    font_path: Path
    padding_policy: str = DEFAULT_PADDING_POLICY
    digit_trim_policy: str = DEFAULT_DIGIT_TRIM_POLICY
    port: int = DEFAULT_PORT


def load_settings(env_file: Path | None = None) -> Settings:
    """Build settings from the environment.

    A `.env` file in the working directory (or `env_file`) is loaded first;
    variables already set in the environment win.

    Raises:
        ValueError: If a policy name or the port is invalid
    """
    env_path = env_file or (Path.cwd() / ".env")
    if env_path.exists():
        load_dotenv(env_path)

    assets_dir = Path(os.environ.get("KCG_ASSETS_DIR") or Path.cwd())
    cards_dir = Path(os.environ.get("KCG_CARDS_DIR") or assets_dir / "cards")
    font_path = Path(os.environ.get("KCG_FONT_PATH") or assets_dir / DEFAULT_FONT_NAME)

    padding_policy = os.environ.get("KCG_PADDING_POLICY") or DEFAULT_PADDING_POLICY
    digit_trim_policy = os.environ.get("KCG_DIGIT_TRIM_POLICY") or DEFAULT_DIGIT_TRIM_POLICY
    get_padding_policy(padding_policy)
    get_digit_trim_policy(digit_trim_policy)

    port_raw = os.environ.get("PORT")
    try:
        port = int(port_raw) if port_raw else DEFAULT_PORT
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {port_raw!r}") from None

    return Settings(
        assets_dir=assets_dir,
        cards_dir=cards_dir,
        font_path=font_path,
        padding_policy=padding_policy,
        digit_trim_policy=digit_trim_policy,
        port=port,
    )
