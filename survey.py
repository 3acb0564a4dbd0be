from __future__ import annotations
import argparse
import csv
import logging
import sys
from pathlib import Path
from spoilersweeper.engine import Minesweeper, NO_CELL
from spoilersweeper.features import summarize_board
from generate import add_board_args, options_from_args

logger = logging.getLogger(__name__)

HEADER = ['board', 'seed', 'rows', 'columns', 'mines', 'safe', 'zeros', 'revealed', 'density',
          'zero_regions', 'counts_consistent', 'first_x', 'first_y', 'zero_start']


def survey_board(board: Minesweeper) -> dict | None:
    """Run one generation and collect its stats, or None if it was refused."""
    if board.start() is None:
        return None
    stats = summarize_board(board)
    first = board.first_cell
    stats['first_x'], stats['first_y'] = first
    stats['zero_start'] = int(first != NO_CELL and board.grid[first[0]][first[1]].adj_mines == 0)
    return stats


def log_board(csv_path: Path, row: dict) -> None:
    """Append one board's stats, writing the header on a new file."""
    new_file = not csv_path.exists()
    if new_file:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
    with csv_path.open('a', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=HEADER)
        if new_file:
            writer.writeheader()
        writer.writerow(row)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Generate many fields and log their stats to CSV')
    add_board_args(parser)
    parser.add_argument('--boards', type=int, default=100)
    parser.add_argument('--seed', type=int, default=0, help='Seed of the first board; board i uses seed + i')
    parser.add_argument('--log_csv', type=str, default='logs/survey.csv')
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    csv_path = Path(args.log_csv)
    written = 0
    for i in range(args.boards):
        seed = args.seed + i
        board = Minesweeper(options_from_args(args, seed=seed))
        stats = survey_board(board)
        if stats is None:
            print(f"[survey] Too many mines ({args.mines}) for a {args.rows}x{args.columns} field", file=sys.stderr)
            return 1
        if not stats['counts_consistent']:
            logger.warning("Board %d (seed %d) has inconsistent neighbor counts", i, seed)
        log_board(csv_path, {'board': i, 'seed': seed, **stats})
        written += 1
    print(f"[survey] Wrote {written} boards to {csv_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
