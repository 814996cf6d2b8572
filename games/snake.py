import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config import INITIAL_LENGTH


# --- 🧭 Direction ---
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self):
        return self.value

    @property
    def opposite(self):
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


# --- 🧱 Tiles ---
class TileKind(Enum):
    EMPTY = "empty"
    FOOD = "food"
    SNAKE = "snake"


GLYPHS = {
    TileKind.EMPTY: "  ",
    TileKind.FOOD: "><",
    TileKind.SNAKE: "██",
}


@dataclass(frozen=True)
class Tile:
    """One grid cell. `age` only means something for snake segments."""
    kind: TileKind
    age: int = 0

    @classmethod
    def snake(cls, age=0):
        return cls(TileKind.SNAKE, age)

    @property
    def ascii_rep(self):
        # age is never shown
        return GLYPHS[self.kind]


EMPTY = Tile(TileKind.EMPTY)
FOOD = Tile(TileKind.FOOD)


class Grid:
    """Fixed-size board addressed as grid[x, y]."""

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._tiles = [[EMPTY for _ in range(height)] for _ in range(width)]  # _tiles[x][y]

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, pos):
        x, y = pos
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        return x, y

    def __getitem__(self, pos):
        x, y = self._check(pos)
        return self._tiles[x][y]

    def __setitem__(self, pos, tile):
        x, y = self._check(pos)
        self._tiles[x][y] = tile

    def cells(self):
        for x in range(self.width):
            for y in range(self.height):
                yield (x, y), self._tiles[x][y]

    def count(self, kind):
        return sum(1 for _, tile in self.cells() if tile.kind is kind)

    def empty_cells(self):
        return [pos for pos, tile in self.cells() if tile.kind is TileKind.EMPTY]

    def rows(self):
        return tuple(
            tuple(self._tiles[x][y] for x in range(self.width))
            for y in range(self.height)
        )


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer. rows[y][x]."""
    width: int
    height: int
    rows: tuple
    length: int
    alive: bool = True
    won: bool = False
    death_reason: Optional[str] = None

    def tile(self, x, y):
        return self.rows[y][x]


# --- 🐍 Game state ---
class GameState:
    def __init__(self, width, height, length=INITIAL_LENGTH, rng=None):
        self.width = width
        self.height = height
        self.grid = Grid(width, height)
        self.rng = rng or random.Random()
        self.direction = Direction.UP
        self.alive = True
        self.won = False
        self.death_reason = None
        self.length = length
        self.head_x = width // 2
        self.head_y = height // 2

        self.spawn_food()

    @property
    def head(self):
        return self.head_x, self.head_y

    @property
    def over(self):
        return not self.alive or self.won

    def set_direction(self, direction):
        """
        Change heading. Reversing straight into the neck is refused:
        returns False and leaves the direction alone.
        """
        if direction == self.direction.opposite:
            return False
        self.direction = direction
        return True

    def _die(self, reason):
        self.alive = False
        self.death_reason = reason

    def tick(self):
        if self.over:
            return

        dx, dy = self.direction.delta
        self.head_x += dx
        self.head_y += dy

        if not self.grid.in_bounds(self.head_x, self.head_y):
            self._die("wall")
            return

        tile = self.grid[self.head]
        if tile.kind is TileKind.SNAKE:
            self._die("self")
            return
        if tile.kind is TileKind.FOOD:
            self.length += 1
            # head cell still holds the old food, so it can't be picked again
            if not self.spawn_food():
                self.won = True

        self._age_segments()
        self.grid[self.head] = Tile.snake(0)

    def _age_segments(self):
        # Segments are only identified by age, so the whole board is walked.
        for pos, tile in self.grid.cells():
            if tile.kind is not TileKind.SNAKE:
                continue
            if tile.age + 1 >= self.length:
                self.grid[pos] = EMPTY
            else:
                self.grid[pos] = Tile.snake(tile.age + 1)

    def spawn_food(self):
        """
        Drop one food on a random empty cell.

        Rejection-samples like a plain random pick, capped at width*height tries;
        after that it chooses among the remaining empty cells directly.
        Returns False when the board has no empty cell left.
        """
        for _ in range(self.width * self.height):
            x = self.rng.randrange(self.width)
            y = self.rng.randrange(self.height)
            if self.grid[x, y].kind is TileKind.EMPTY:
                self.grid[x, y] = FOOD
                return True

        empty = self.grid.empty_cells()
        if not empty:
            return False
        self.grid[self.rng.choice(empty)] = FOOD
        return True

    def snapshot(self):
        return Snapshot(
            width=self.width,
            height=self.height,
            rows=self.grid.rows(),
            length=self.length,
            alive=self.alive,
            won=self.won,
            death_reason=self.death_reason,
        )

    def __repr__(self):
        return (
            f"<GameState head={self.head} direction={self.direction.name} "
            f"length={self.length} alive={self.alive}>"
        )
