#!/usr/bin/env python3
"""KCG deck tools CLI - decode deck codes and render deck sheets."""

import logging
from pathlib import Path

import click

from kcgdeck import __version__
from kcgdeck.config import DEFAULT_FONT_NAME, load_settings
from kcgdeck.deck import cards_from_message, generate_decklist, is_deck_code, save_decklist, tally
from kcgdeck.deckcode import DIGIT_TRIM_POLICIES, PADDING_POLICIES, DeckCodeError


def _read_cards(message: str, padding: str | None, digit_trim: str | None) -> list[str]:
    """Decode a message into card IDs or exit with the bot's failure reply."""
    settings = load_settings()
    try:
        card_ids = cards_from_message(
            message,
            padding=padding or settings.padding_policy,
            digit_trim=digit_trim or settings.digit_trim_policy,
        )
    except DeckCodeError as e:
        raise click.ClickException(f"Failed to decode deck code: {e.message}")

    if card_ids is None:
        raise click.ClickException("Not a deck code or a slash-separated card list.")
    if not card_ids:
        raise click.ClickException("No valid card IDs found.")
    return card_ids


def _policy_options(func):
    func = click.option("--digit-trim", type=click.Choice(list(DIGIT_TRIM_POLICIES)),
                        help="Digit-trim policy (default from KCG_DIGIT_TRIM_POLICY)")(func)
    func = click.option("--padding", type=click.Choice(list(PADDING_POLICIES)),
                        help="Padding-trim policy (default from KCG_PADDING_POLICY)")(func)
    return func


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """KCG deck tools - decode deck codes and render deck sheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )


@cli.command()
@click.argument("message")
@_policy_options
@click.option("--counts", is_flag=True, help="Print 'count x card' per distinct card")
def decode(message, padding, digit_trim, counts):
    """Decode a deck code (or card list) into card IDs."""
    card_ids = _read_cards(message, padding, digit_trim)
    if counts:
        for card_id, count in tally(card_ids, valid_only=False).items():
            click.echo(f"{count} x {card_id}")
    else:
        for card_id in card_ids:
            click.echo(card_id)


@cli.command()
@click.argument("message")
@_policy_options
@click.option("--out", "out_path", default="decklist.yml", help="Output path (.yml/.yaml for YAML, else JSON)")
def decklist(message, padding, digit_trim, out_path):
    """Write a decklist manifest for a deck code."""
    card_ids = _read_cards(message, padding, digit_trim)
    code = message if is_deck_code(message) else None
    manifest = generate_decklist(card_ids, code)
    saved_path = save_decklist(manifest, Path(out_path))

    click.echo(f"Decklist saved to: {saved_path}")
    click.echo(f"Total: {manifest['total_cards']} cards ({manifest['distinct_cards']} distinct)")
    if manifest["rejected"]:
        click.echo(f"[WARN] {len(manifest['rejected'])} invalid card ID(s) ignored")


@cli.command()
@click.argument("message")
@_policy_options
@click.option("--out", "out_path", default="deck.jpg", help="Output JPEG path")
@click.option("--assets-dir", type=click.Path(exists=True, file_okay=False),
              help="Directory with sheet backgrounds, cards/ and font (default from KCG_ASSETS_DIR)")
def render(message, padding, digit_trim, out_path, assets_dir):
    """Render a deck code (or card list) to a JPEG deck sheet."""
    from kcgdeck.render import AssetError, AssetLibrary, render_deck_sheet, sheet_to_jpeg

    card_ids = _read_cards(message, padding, digit_trim)
    counts = tally(card_ids)
    if not counts:
        raise click.ClickException("No valid card IDs found.")

    if assets_dir:
        assets_path = Path(assets_dir)
        assets = AssetLibrary(assets_path, font_path=assets_path / DEFAULT_FONT_NAME)
    else:
        assets = AssetLibrary.from_settings(load_settings())

    try:
        sheet = render_deck_sheet(counts, assets)
    except AssetError as e:
        raise click.ClickException(f"Failed to generate deck image: {e}")

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(sheet_to_jpeg(sheet))
    click.echo(f"Generated: {out}")


@cli.command()
@click.option("--port", type=int, help="Port to listen on (default from PORT, else 3000)")
def serve(port):
    """Run the health-check HTTP endpoint."""
    from kcgdeck.server import serve as run_server

    run_server(port or load_settings().port)


if __name__ == "__main__":
    cli()
