from __future__ import annotations
import argparse
import csv
from pathlib import Path
from statistics import mean


def read_survey(path: Path):
    with path.open(newline='') as f:
        return list(csv.DictReader(f))


def parse_number(value):
    """Float value of a CSV cell, or None when it is empty or not numeric."""
    if value in (None, '', 'None'):
        return None
    try:
        return float(value)
    except ValueError:
        return None


def column(rows, name):
    values = [parse_number(r.get(name)) for r in rows]
    return [x for x in values if x is not None]


def summarize(rows):
    if not rows:
        return "No survey rows found."
    out = []
    density = column(rows, 'density')
    revealed = column(rows, 'revealed')
    zeros = column(rows, 'zeros')
    regions = column(rows, 'zero_regions')
    zero_starts = column(rows, 'zero_start')
    inconsistent = [r for r in rows if r.get('counts_consistent') not in ('True', '1')]

    out.append(f"Boards: {len(rows)}")
    if density:
        out.append(f"Avg mine density: {mean(density):.3f}")
    if zeros:
        out.append(f"Avg zero cells: {mean(zeros):.2f}")
    if regions:
        out.append(f"Avg zero regions: {mean(regions):.2f}")
    if revealed:
        out.append(f"Avg revealed cells: {mean(revealed):.2f}")
    if zero_starts:
        out.append(f"Zero start rate: {mean(zero_starts):.3f}")
    out.append(f"Inconsistent boards: {len(inconsistent)}")
    return "\n".join(out)


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--log_csv', type=str, default='logs/survey.csv')
    parser.add_argument('--out', type=str, default='REPORT.md')
    args = parser.parse_args(argv)

    rows = read_survey(Path(args.log_csv))
    text = summarize(rows)
    Path(args.out).write_text('# Survey Report\n\n' + text + '\n')
    print(text)


if __name__ == '__main__':
    main()
