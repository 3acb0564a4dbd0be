from __future__ import annotations
from typing import Dict, Union
import numpy as np

# Array views over a generated field, indexed [row, column] like the grid:
# - mine / revealed masks and the number board (-1 for mines)
# - a vectorized neighbor count to cross-check the engine's counts
# - per-board summary stats used by the survey script


def mine_mask(board) -> np.ndarray:
    return np.array([[c.is_mine for c in row] for row in board.grid], dtype=bool).reshape(board.rows, board.columns)


def revealed_mask(board) -> np.ndarray:
    return np.array([[c.is_revealed for c in row] for row in board.grid], dtype=bool).reshape(board.rows, board.columns)


def number_board(board) -> np.ndarray:
    numbers = np.array([[c.adj_mines for c in row] for row in board.grid], dtype=int).reshape(board.rows, board.columns)
    numbers[mine_mask(board)] = -1
    return numbers


def count_neighbor_mines(mask: np.ndarray) -> np.ndarray:
    """Number of mines in the 8-neighborhood of every cell, mines included."""
    rows, cols = mask.shape
    padded = np.pad(mask.astype(int), 1)
    counts = np.zeros((rows, cols), dtype=int)
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            counts += padded[1 + dx:1 + dx + rows, 1 + dy:1 + dy + cols]
    return counts


def zero_regions(board) -> int:
    zeros = number_board(board) == 0
    rows, cols = zeros.shape
    visited = np.zeros_like(zeros, dtype=bool)
    regions = 0
    for r in range(rows):
        for c in range(cols):
            if not zeros[r, c] or visited[r, c]:
                continue
            regions += 1
            stack = [(r, c)]
            visited[r, c] = True
            while stack:
                cr, cc = stack.pop()
                for nr, nc in board.neighbors(cr, cc):
                    if zeros[nr, nc] and not visited[nr, nc]:
                        visited[nr, nc] = True
                        stack.append((nr, nc))
    return regions


def summarize_board(board) -> Dict[str, Union[int, float, bool]]:
    mines = mine_mask(board)
    numbers = number_board(board)
    expected = count_neighbor_mines(mines)
    total = board.rows * board.columns
    n_mines = int(mines.sum())
    return {
        'rows': board.rows,
        'columns': board.columns,
        'mines': n_mines,
        'safe': total - n_mines,
        'zeros': int((numbers == 0).sum()),
        'revealed': int(revealed_mask(board).sum()),
        'density': n_mines / float(max(1, total)),
        'zero_regions': zero_regions(board),
        'counts_consistent': bool(np.array_equal(numbers[~mines], expected[~mines])),
    }
