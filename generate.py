from __future__ import annotations
import argparse
import logging
import sys
from spoilersweeper.engine import Minesweeper, MinesweeperOptions, RETURN_TYPES


def add_board_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--rows', type=int, default=9)
    parser.add_argument('--columns', type=int, default=9)
    parser.add_argument('--mines', type=int, default=10)
    parser.add_argument('--emote', type=str, default='boom', help='Emoji name used for mines')
    parser.add_argument('--no-spaces', dest='spaces', action='store_false',
                        help='Do not pad spoiler tags and cells with spaces')
    parser.add_argument('--reveal-first', dest='reveal_first_cell', action='store_true',
                        help='Reveal one safe cell before printing')
    parser.add_argument('--no-zero-first', dest='zero_first_cell', action='store_false',
                        help='Reveal any safe cell instead of opening a zero area')
    parser.add_argument('--verbose', action='store_true')


def options_from_args(args: argparse.Namespace, **overrides) -> MinesweeperOptions:
    values = dict(
        rows=args.rows,
        columns=args.columns,
        mines=args.mines,
        emote=args.emote,
        spaces=args.spaces,
        reveal_first_cell=args.reveal_first_cell,
        zero_first_cell=args.zero_first_cell,
    )
    values.update(overrides)
    return MinesweeperOptions(**values)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Print a spoiler-tagged Minesweeper field')
    add_board_args(parser)
    parser.add_argument('--return-type', dest='return_type', type=str, default='emoji', choices=list(RETURN_TYPES))
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    options = options_from_args(args, return_type=args.return_type,
                                seed=(None if args.seed < 0 else args.seed))
    output = Minesweeper(options).start()
    if output is None:
        print(f"[generate] Too many mines ({options.mines}) for a {options.rows}x{options.columns} field",
              file=sys.stderr)
        return 1
    if isinstance(output, list):
        for row in output:
            print(row)
    else:
        print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
