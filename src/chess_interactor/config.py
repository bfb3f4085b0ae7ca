"""Interactor configuration: command-line flags with environment fallbacks."""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from chess_interactor.core.errors import SetupError
from chess_interactor.core.position import Position
from chess_interactor.engine import POLICIES
from chess_interactor.protocol.notation import parse_initial_position

LOG_LEVEL_ENV = "CHESS_INTERACTOR_LOG"

DEFAULT_ANSWER_FILE = Path("answer.txt")
# 50 White moves, counted in half-moves.
DEFAULT_MOVE_LIMIT = 100
DEFAULT_SEARCH_DEPTH = 3
DEFAULT_POLICY = "minimax"


@dataclass(slots=True, frozen=True)
class InteractorConfig:
    """Immutable match configuration.

    Args:
        answer_file: File holding the initial ``"<wk> <wq> <bk>"`` squares.
        move_limit: Half-move budget for the whole match.
        policy: Name of the adversary policy (see ``chess_interactor.engine``).
        search_depth: Look-ahead cap for the minimax policy, in half-moves.
        allow_king_moves: Whether White may move its king.
        log_level: Logging level name for the stderr handler.
    """

    answer_file: Path = DEFAULT_ANSWER_FILE
    move_limit: int = DEFAULT_MOVE_LIMIT
    policy: str = DEFAULT_POLICY
    search_depth: int = DEFAULT_SEARCH_DEPTH
    allow_king_moves: bool = True
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.move_limit <= 0:
            raise SetupError(f"Move limit must be positive, got {self.move_limit}")
        if self.search_depth < 0:
            raise SetupError(f"Search depth must be >= 0, got {self.search_depth}")
        if self.policy not in POLICIES:
            raise SetupError(f"Unknown adversary policy: {self.policy!r}")

    def load_position(self) -> Position:
        """Read and validate the initial position from :attr:`answer_file`."""
        try:
            text = self.answer_file.read_text(encoding="utf-8")
        except OSError as exc:
            raise SetupError(f"Unable to read {self.answer_file}: {exc}") from exc
        return parse_initial_position(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chess-interactor",
        description="Judge a King+Queen vs King mating exercise over stdin/stdout.",
    )
    parser.add_argument(
        "--answer",
        type=Path,
        default=DEFAULT_ANSWER_FILE,
        help="file with the initial white king, white queen and black king squares",
    )
    parser.add_argument(
        "--move-limit",
        type=int,
        default=DEFAULT_MOVE_LIMIT,
        help="half-move budget (default: %(default)s)",
    )
    parser.add_argument(
        "--policy",
        choices=sorted(POLICIES),
        default=DEFAULT_POLICY,
        help="black king policy (default: %(default)s)",
    )
    parser.add_argument(
        "--search-depth",
        type=int,
        default=DEFAULT_SEARCH_DEPTH,
        help="minimax look-ahead in half-moves (default: %(default)s)",
    )
    parser.add_argument(
        "--no-king-moves",
        dest="allow_king_moves",
        action="store_false",
        help="reject every white king move",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"stderr log level (default: ${LOG_LEVEL_ENV} or INFO)",
    )
    return parser


def load_config(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> InteractorConfig:
    """Build the configuration from *argv* and *environ*."""
    env = os.environ if environ is None else environ
    args = build_parser().parse_args(argv)
    log_level = args.log_level or env.get(LOG_LEVEL_ENV) or "INFO"
    return InteractorConfig(
        answer_file=args.answer,
        move_limit=args.move_limit,
        policy=args.policy,
        search_depth=args.search_depth,
        allow_king_moves=args.allow_king_moves,
        log_level=log_level.upper(),
    )
