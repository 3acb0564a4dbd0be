from __future__ import annotations
import logging
import random
from collections import deque
from dataclasses import dataclass, replace
from typing import List, Tuple, Optional, Union

logger = logging.getLogger(__name__)

# (row, column)
Coordinate = Tuple[int, int]

NO_CELL: Coordinate = (-1, -1)
NUMBER_NAMES = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight")
RETURN_TYPES = ("emoji", "code", "matrix")


def spoilerize(name: str, spaces: bool = True) -> str:
    """Wrap an emoji name in a Discord spoiler tag."""
    return f"|| :{name}: ||" if spaces else f"||:{name}:||"


@dataclass
class Cell:
    is_mine: bool = False
    adj_mines: int = 0
    is_revealed: bool = False


@dataclass
class CellTypes:
    mine: str
    numbers: List[str]


@dataclass(frozen=True)
class MinesweeperOptions:
    rows: int = 9
    columns: int = 9
    mines: int = 10
    emote: str = "boom"
    numbers: Tuple[str, ...] = NUMBER_NAMES
    spaces: bool = True
    # Reveal one safe cell before returning the board, like a first click.
    reveal_first_cell: bool = False
    # Only meaningful with reveal_first_cell: start on a zero and open its area.
    zero_first_cell: bool = True
    return_type: str = "emoji"
    seed: Optional[int] = None


class Minesweeper:
    """Generates a mine field and renders it as spoiler-tagged emoji.

    Cells are addressed as ``grid[x][y]`` where ``x`` is the row and ``y`` the
    column. A run goes through four stages, in order: empty matrix, mines,
    neighbor counts, first reveal. ``start`` runs all of them.
    """

    def __init__(self, options: Optional[MinesweeperOptions] = None, rng: Optional[random.Random] = None, **overrides):
        self.options = replace(options or MinesweeperOptions(), **overrides)
        if self.options.return_type not in RETURN_TYPES:
            raise ValueError(f"return_type must be one of {RETURN_TYPES}, got {self.options.return_type!r}")
        if len(self.options.numbers) != 9:
            raise ValueError(f"Expected 9 number names, got {len(self.options.numbers)}")
        self.rows = self.options.rows
        self.columns = self.options.columns
        self.mines = self.options.mines
        self.emote = self.options.emote
        self.spaces = self.options.spaces
        self.reveal_first_cell = self.options.reveal_first_cell
        self.zero_first_cell = self.options.zero_first_cell
        self.return_type = self.options.return_type
        # An injected source is kept across runs; otherwise each run gets its own
        self._injected_rng = rng
        self.rng = rng if rng is not None else self.new_rng()
        self.types = CellTypes(
            mine=self.spoilerize(self.emote),
            numbers=[self.spoilerize(n) for n in self.options.numbers],
        )
        self.grid: List[List[Cell]] = []
        self._safe_cells: List[Coordinate] = []
        self.first_cell: Coordinate = NO_CELL

    @property
    def safe_cells(self) -> Tuple[Coordinate, ...]:
        return tuple(self._safe_cells)

    def new_rng(self) -> random.Random:
        if self.options.seed is not None:
            return random.Random(int(self.options.seed))
        return random.Random()

    def spoilerize(self, name: str) -> str:
        return spoilerize(name, self.spaces)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.rows and 0 <= y < self.columns

    def neighbors(self, x: int, y: int) -> List[Coordinate]:
        coords = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    coords.append((nx, ny))
        return coords

    def generate_empty_matrix(self) -> None:
        self.grid = [[Cell() for _ in range(self.columns)] for _ in range(self.rows)]
        self._safe_cells = []
        self.first_cell = NO_CELL

    def plant_mines(self) -> None:
        planted = 0
        while planted < self.mines:
            x = self.rng.randrange(self.rows)
            y = self.rng.randrange(self.columns)
            if self.grid[x][y].is_mine:
                continue
            self.grid[x][y].is_mine = True
            planted += 1
        logger.debug("Planted %d mines on a %dx%d field", planted, self.rows, self.columns)

    def number_of_mines(self, x: int, y: int) -> Optional[int]:
        """Count the mines around (x, y) and register it as a safe cell.

        Returns None when (x, y) is itself a mine.
        """
        if self.grid[x][y].is_mine:
            return None
        self._safe_cells.append((x, y))
        return sum(1 for (nx, ny) in self.neighbors(x, y) if self.grid[nx][ny].is_mine)

    def populate(self) -> None:
        self._safe_cells = []
        for x in range(self.rows):
            for y in range(self.columns):
                count = self.number_of_mines(x, y)
                if count is not None:
                    self.grid[x][y].adj_mines = count
        logger.debug("Populated field, %d safe cells", len(self._safe_cells))

    def reveal_first(self) -> Coordinate:
        """Reveal a random safe cell, returning its coordinate or NO_CELL."""
        if not self.reveal_first_cell:
            return NO_CELL

        zero_cells = [(x, y) for (x, y) in self._safe_cells if self.grid[x][y].adj_mines == 0]
        if self.zero_first_cell and zero_cells:
            x, y = self.rng.choice(zero_cells)
            self.grid[x][y].is_revealed = True
            self.reveal_surroundings((x, y))
        else:
            # No zero to start from: a single safe cell, no flood fill
            x, y = self.rng.choice(self._safe_cells)
            self.grid[x][y].is_revealed = True
        logger.debug("Revealed first cell at (%d, %d)", x, y)
        return (x, y)

    def reveal_surroundings(self, cell: Coordinate, recurse: bool = True) -> None:
        """Reveal the 3x3 area around a zero cell.

        With ``recurse`` every zero cell uncovered along the way is expanded
        too, until the whole connected zero region and its border are open.
        """
        queue = deque([cell])
        while queue:
            x, y = queue.popleft()
            for i in range(max(0, x - 1), min(self.rows, x + 2)):
                for j in range(max(0, y - 1), min(self.columns, y + 2)):
                    c = self.grid[i][j]
                    if c.is_revealed or c.is_mine:
                        continue
                    c.is_revealed = True
                    if recurse and c.adj_mines == 0:
                        queue.append((i, j))

    def token(self, cell: Cell) -> str:
        masked = self.types.mine if cell.is_mine else self.types.numbers[cell.adj_mines]
        # Revealing strips only the spoiler bars, padding stays
        return masked[2:-2] if cell.is_revealed else masked

    def to_matrix(self) -> List[List[str]]:
        return [[self.token(c) for c in row] for row in self.grid]

    def get_text_representation(self) -> str:
        separator = " " if self.spaces else ""
        return "\n".join(separator.join(row) for row in self.to_matrix())

    def is_playable(self) -> bool:
        if self.rows <= 0 or self.columns <= 0 or self.mines < 0:
            return False
        return self.rows * self.columns > self.mines * 2

    def start(self, rng: Optional[random.Random] = None) -> Union[str, List[List[str]], None]:
        """Generate a mine field and return it in the configured shape.

        Returns None when the field is too small for its mines.
        """
        if rng is not None:
            self._injected_rng = rng
        self.rng = self._injected_rng if self._injected_rng is not None else self.new_rng()
        if not self.is_playable():
            logger.info("Refusing %dx%d field with %d mines", self.rows, self.columns, self.mines)
            return None

        self.generate_empty_matrix()
        self.plant_mines()
        self.populate()
        self.first_cell = self.reveal_first()

        if self.return_type == "code":
            return f"```{self.get_text_representation()}```"
        if self.return_type == "matrix":
            return self.to_matrix()
        return self.get_text_representation()


def generate(**options) -> Union[str, List[List[str]], None]:
    return Minesweeper(**options).start()
