"""
Game constants for snek.
"""

# Movement directions as (dx, dy) unit vectors; y grows downwards
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
VALID_DIRECTIONS = {UP, DOWN, LEFT, RIGHT}

# Raw key identifiers -> direction
KEY_BINDINGS = {
    "w": UP,
    "ArrowUp": UP,
    "a": LEFT,
    "ArrowLeft": LEFT,
    "s": DOWN,
    "ArrowDown": DOWN,
    "d": RIGHT,
    "ArrowRight": RIGHT,
}

# Board settings
BOARD_WIDTH = 250
BOARD_HEIGHT = 250
CELL_SIZE = 10
# Food respawn needs free cells, so tiny boards are refused
MIN_BOARD_CELLS_PER_SIDE = 5

# Snake settings
START_CELL = (200, 200)
START_DIRECTION = RIGHT
INITIAL_SNAKE_LENGTH = 1

# Timing
INITIAL_TICK_MS = 200
SPEEDUP_FRACTION = 0.1

# Food settings
FOOD_LIFESPAN = 100
FOOD_EXPIRY_THRESHOLD = 50
FOOD_EXPIRY_CHANCE = 0.1

# Surface cell kinds
SNAKE = "snake"
FOOD = "food"
