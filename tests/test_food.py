"""
Tests for the Food entity.
"""

import random

from snek.domain.board import Board
from snek.domain.constants import FOOD
from snek.domain.food import Food

from conftest import scripted_rng


class TestFoodSpawn:
    """Placement of the food."""

    def test_new_food_has_no_position(self, board, surface):
        """Food has no position until it is spawned."""
        food = Food(board, surface, scripted_rng())
        assert food.position is None
        assert food.x is None and food.y is None

    def test_spawn_places_and_draws(self, board, surface):
        """spawn() commits the sampled cell and draws it as food."""
        food = Food(board, surface, scripted_rng(cells=[(30, 40)]))
        food.spawn([(200, 200)])

        assert food.position == (30, 40)
        assert (food.x, food.y) == (30, 40)
        assert surface.cells[(30, 40)] == FOOD

    def test_spawn_rejects_occupied_cells(self, board, surface):
        """Occupied cells are re-sampled until a free one comes up."""
        rng = scripted_rng(cells=[(200, 200), (210, 200), (50, 60)])
        food = Food(board, surface, rng)

        food.spawn([(200, 200), (210, 200)])

        assert food.position == (50, 60)
        assert rng.randrange.call_count == 6

    def test_spawn_resets_lifespan(self, board, surface):
        food = Food(board, surface, scripted_rng())
        food.lifespan = 3
        food.spawn([])
        assert food.lifespan == 100

    def test_spawn_never_lands_on_occupied(self, surface):
        """With a nearly full board the only free cell is always chosen."""
        small = Board(30, 30, 10)
        free = (20, 10)
        occupied = [cell for cell in small.cells() if cell != free]
        food = Food(small, surface, random.Random(1))

        for _ in range(20):
            assert food.spawn(occupied) == free

    def test_clear_erases_without_moving(self, board, surface):
        """clear() wipes the cell on the surface but keeps the position."""
        food = Food(board, surface, scripted_rng(cells=[(30, 40)]))
        food.spawn([])

        food.clear()

        assert (30, 40) not in surface.cells
        assert food.position == (30, 40)


class TestFoodExpiry:
    """Lifespan ageing and the expiry policy."""

    def test_young_food_never_draws(self, board, surface):
        """While lifespan is 50 or more no random draw is made."""
        rng = scripted_rng()
        food = Food(board, surface, rng)
        food.lifespan = 50

        assert food.tick_expired() is False
        assert food.lifespan == 49
        rng.random.assert_not_called()

    def test_old_food_expires_on_low_draw(self, board, surface):
        """Below 50 a draw under 0.1 expires the food."""
        food = Food(board, surface, scripted_rng(randoms=[0.05]))
        food.lifespan = 49

        assert food.tick_expired() is True
        assert food.lifespan == 48

    def test_old_food_survives_high_draw(self, board, surface):
        food = Food(board, surface, scripted_rng(randoms=[0.5]))
        food.lifespan = 49

        assert food.tick_expired() is False

    def test_draw_repeats_every_tick(self, board, surface):
        """Each tick below the threshold makes a fresh draw."""
        rng = scripted_rng(randoms=[0.5, 0.5, 0.5])
        food = Food(board, surface, rng)
        food.lifespan = 40

        for _ in range(3):
            food.tick_expired()

        assert rng.random.call_count == 3
        assert food.lifespan == 37

    def test_exhausted_lifespan_always_expires(self, board, surface):
        """Reaching zero expires the food whatever the draw."""
        food = Food(board, surface, scripted_rng(randoms=[0.99]))
        food.lifespan = 1

        assert food.tick_expired() is True
        assert food.lifespan == 0
