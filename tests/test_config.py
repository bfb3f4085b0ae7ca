"""Tests for configuration loading."""

from pathlib import Path

import pytest

from chess_interactor.config import (
    DEFAULT_MOVE_LIMIT,
    LOG_LEVEL_ENV,
    InteractorConfig,
    load_config,
)
from chess_interactor.core.errors import SetupError


class TestLoadConfig:
    def test_defaults(self) -> None:
        config = load_config([], environ={})
        assert config.answer_file == Path("answer.txt")
        assert config.move_limit == DEFAULT_MOVE_LIMIT == 100
        assert config.policy == "minimax"
        assert config.search_depth == 3
        assert config.allow_king_moves
        assert config.log_level == "INFO"

    def test_flags(self) -> None:
        config = load_config(
            [
                "--answer", "start.txt",
                "--move-limit", "20",
                "--policy", "scan-order",
                "--search-depth", "5",
                "--no-king-moves",
                "--log-level", "debug",
            ],
            environ={},
        )
        assert config.answer_file == Path("start.txt")
        assert config.move_limit == 20
        assert config.policy == "scan-order"
        assert config.search_depth == 5
        assert not config.allow_king_moves
        assert config.log_level == "DEBUG"

    def test_log_level_from_environment(self) -> None:
        config = load_config([], environ={LOG_LEVEL_ENV: "warning"})
        assert config.log_level == "WARNING"

    def test_flag_beats_environment(self) -> None:
        config = load_config(["--log-level", "ERROR"], environ={LOG_LEVEL_ENV: "DEBUG"})
        assert config.log_level == "ERROR"

    def test_unknown_policy_flag_exits(self) -> None:
        with pytest.raises(SystemExit):
            load_config(["--policy", "random"], environ={})


class TestValidation:
    def test_non_positive_move_limit(self) -> None:
        with pytest.raises(SetupError):
            InteractorConfig(move_limit=0)

    def test_negative_depth(self) -> None:
        with pytest.raises(SetupError):
            InteractorConfig(search_depth=-1)

    def test_unknown_policy(self) -> None:
        with pytest.raises(SetupError):
            InteractorConfig(policy="random")


class TestLoadPosition:
    def test_reads_answer_file(self, tmp_path: Path, scenario_position) -> None:
        answer = tmp_path / "answer.txt"
        answer.write_text("e1 a1 h1\n", encoding="utf-8")
        assert InteractorConfig(answer_file=answer).load_position() == scenario_position

    def test_missing_file(self, tmp_path: Path) -> None:
        config = InteractorConfig(answer_file=tmp_path / "missing.txt")
        with pytest.raises(SetupError, match="Unable to read"):
            config.load_position()
