"""Tests for GameConfig."""

import argparse

import pytest

from snake_core.config import GameConfig, add_arguments
from snake_core.utils import Cell, Direction


class TestGameConfig:
    """Tests for validation and construction."""

    def test_defaults(self):
        config = GameConfig()
        assert (config.width, config.height, config.step, config.block_size) == (1000, 1000, 40, 39)
        assert config.initial_direction is Direction.RIGHT
        assert config.initial_cells() == [Cell(0, 0), Cell(0, 40)]
        assert config.grid().columns == 25

    def test_direction_given_by_name(self):
        assert GameConfig(initial_direction="up").initial_direction is Direction.UP

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"step": 0},
            {"width": 1010},
            {"height": -40},
            {"block_size": 41},
            {"speed_decay": 1.0},
            {"speed_decay": 0.0},
            {"min_speed_ms": 600},
            {"min_speed_ms": 0},
            {"initial_snake": ((0, 0),)},
            {"initial_snake": ((0, 0), (0, -40))},
            {"initial_direction": "sideways"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_from_args(self):
        parser = argparse.ArgumentParser()
        add_arguments(parser)
        args = parser.parse_args(["--step", "20", "--board-width", "400", "--board-height", "200", "--seed", "5"])
        config = GameConfig.from_args(args)
        assert config.step == 20
        assert config.block_size == 19
        assert (config.width, config.height) == (400, 200)
        assert config.seed == 5
        assert config.base_speed_ms == 500

    def test_from_args_clamps_min_speed(self):
        parser = argparse.ArgumentParser()
        add_arguments(parser)
        config = GameConfig.from_args(parser.parse_args(["--speed", "30"]))
        assert config.min_speed_ms == 30
