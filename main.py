"""
main.py — Entry point.

Run with:
    python main.py

Requires:
    pip install pygame
"""

import logging
import sys

from snake_game.controller import GameController
from snake_game.view import FontLoadError

logger = logging.getLogger("snake_game")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        controller = GameController()
    except FontLoadError as exc:
        logger.critical("%s", exc)
        sys.exit(1)
    controller.run()


if __name__ == "__main__":
    main()
