"""Main entry point for the terminal task board."""
import logging
from typing import Optional
import click
from board import Board
from cli import CLI
from config import LOG_LEVELS, load_settings
from layout import card_cell_height
from models import sample_tasks


@click.command()
@click.option('--card-height', type=click.FloatRange(min=0), default=None, help='Card height in pixels.')
@click.option('--card-margin', type=click.FloatRange(min=0), default=None, help='Vertical margin above and below each card.')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None, help='Logging level.')
@click.option('--alt-screen/--no-alt-screen', default=None, help='Use the terminal alternate screen.')
def main(card_height: Optional[float], card_margin: Optional[float], log_level: Optional[str], alt_screen: Optional[bool]):
    """Two-column task board with simulated drag and drop."""
    settings = load_settings()
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    cell_height = card_cell_height(
        settings.card_height if card_height is None else card_height,
        settings.card_margin if card_margin is None else card_margin,
    )
    if cell_height <= 0:
        raise click.BadParameter('card height and margin give a zero cell height', param_hint='--card-height')
    board = Board(sample_tasks(), cell_height=cell_height)
    cli = CLI(board, alt_screen=settings.alt_screen if alt_screen is None else alt_screen)
    cli.run()


if __name__ == "__main__":
    main()
