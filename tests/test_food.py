"""Tests for the food manager."""

import random

from snake_core.food import Food, FoodManager
from snake_core.grid import Grid
from snake_core.snake import Snake
from snake_core.utils import Cell


def make_snake(*pairs):
    return Snake.from_cells(Cell(x, y) for x, y in pairs)


class TestPlace:
    """Tests for FoodManager.place."""

    def test_place_stores_a_quantized_food(self, rng):
        grid = Grid()
        manager = FoodManager(grid, rng)
        food = manager.place(make_snake((0, 0), (0, 40)))
        assert manager.food is food
        assert food.cell.x % grid.step == 0
        assert food.cell.y % grid.step == 0
        assert not grid.is_out_of_bounds(food.cell)

    def test_color_is_an_rgb_triple(self, rng):
        food = FoodManager(Grid(), rng).place(make_snake((0, 0), (0, 40)))
        assert len(food.color) == 3
        assert all(0 <= channel <= 255 for channel in food.color)

    def test_never_placed_on_the_snake(self):
        """With one free cell left, food always lands there."""
        grid = Grid(width=120, height=40, step=40)
        snake = make_snake((0, 0), (40, 0))
        for seed in range(30):
            food = FoodManager(grid, random.Random(seed)).place(snake)
            assert food.cell == Cell(80, 0)

    def test_falls_back_to_free_cells(self):
        """Without sampling attempts the free cell list is used."""
        grid = Grid(width=120, height=40, step=40)
        manager = FoodManager(grid, random.Random(0), attempts=0)
        food = manager.place(make_snake((80, 0), (40, 0)))
        assert food.cell == Cell(0, 0)

    def test_full_board_leaves_no_food(self):
        grid = Grid(width=80, height=40, step=40)
        manager = FoodManager(grid, random.Random(0))
        assert manager.place(make_snake((0, 0), (40, 0))) is None
        assert manager.food is None

    def test_place_signals_the_previous_food(self, rng):
        """The replaced food is handed to on_clear."""
        stale = []
        manager = FoodManager(Grid(), rng, on_clear=stale.append)
        first = manager.place(make_snake((0, 0), (0, 40)))
        assert stale == []
        manager.place(make_snake((0, 0), (0, 40)))
        assert stale == [first]


class TestConsume:
    """Tests for FoodManager.consume, clear and reset."""

    def test_consume_replaces_the_food(self, rng):
        stale = []
        manager = FoodManager(Grid(), rng, on_clear=stale.append)
        manager.food = Food(Cell(40, 0))
        snake = make_snake((40, 0), (0, 0), (-40, 0))
        new_food = manager.consume(snake)
        assert manager.food is new_food
        assert new_food.cell != Cell(40, 0)
        assert not snake.occupies(new_food.cell)
        assert stale == [Food(Cell(40, 0))]

    def test_clear_keeps_the_food(self, rng):
        stale = []
        manager = FoodManager(Grid(), rng, on_clear=stale.append)
        manager.food = Food(Cell(40, 0))
        manager.clear()
        assert stale == [Food(Cell(40, 0))]
        assert manager.food == Food(Cell(40, 0))

    def test_clear_without_food(self, rng):
        stale = []
        FoodManager(Grid(), rng, on_clear=stale.append).clear()
        assert stale == []

    def test_reset_is_silent(self, rng):
        stale = []
        manager = FoodManager(Grid(), rng, on_clear=stale.append)
        manager.food = Food(Cell(40, 0))
        manager.reset()
        assert manager.food is None
        assert stale == []

    def test_to_dict(self):
        assert Food(Cell(40, 80), (1, 2, 3)).to_dict() == {"x": 40, "y": 80, "color": [1, 2, 3]}
