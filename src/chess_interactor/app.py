"""Application entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from chess_interactor.config import InteractorConfig, load_config
from chess_interactor.core.errors import SetupError
from chess_interactor.engine import make_adversary
from chess_interactor.game.controller import MatchController
from chess_interactor.protocol.session import InteractorSession
from chess_interactor.protocol.verdict import ExitCode

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send all log records to stderr; stdout belongs to the protocol."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=_LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def run(config: InteractorConfig, reader: TextIO, writer: TextIO) -> ExitCode:
    """Play one match with *config* and return the exit code."""
    try:
        position = config.load_position()
    except SetupError:
        _LOGGER.exception("Invalid initial configuration")
        return ExitCode.SETUP_FAILURE

    adversary = make_adversary(config.policy, allow_king_moves=config.allow_king_moves)
    controller = MatchController(adversary, search_depth=config.search_depth)
    session = InteractorSession(controller, reader, writer)
    verdict = session.play(
        position,
        config.move_limit,
        allow_king_moves=config.allow_king_moves,
    )
    _LOGGER.info("%s", verdict)
    return verdict.exit_code


def main(argv: Sequence[str] | None = None) -> int:
    """Launch the interactor on stdin/stdout."""
    try:
        config = load_config(argv)
    except SetupError as exc:
        configure_logging("INFO")
        _LOGGER.error("Invalid configuration: %s", exc)
        return int(ExitCode.SETUP_FAILURE)

    configure_logging(config.log_level)
    _LOGGER.info("Initializing chess interactor")
    return int(run(config, sys.stdin, sys.stdout))


if __name__ == "__main__":
    sys.exit(main())
