import csv

import generate
import report
import survey


def test_generate_prints_board(capsys):
    assert generate.main(['--rows', '2', '--columns', '2', '--mines', '0']) == 0
    out = capsys.readouterr().out
    assert out == "|| :zero: || || :zero: ||\n|| :zero: || || :zero: ||\n"


def test_generate_code_block(capsys):
    assert generate.main(['--return-type', 'code', '--seed', '4']) == 0
    out = capsys.readouterr().out
    assert out.startswith("```")
    assert out.rstrip("\n").endswith("```")


def test_generate_matrix_prints_rows(capsys):
    assert generate.main(['--rows', '3', '--columns', '4', '--mines', '1', '--return-type', 'matrix']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3


def test_generate_refuses_dense_board(capsys):
    assert generate.main(['--rows', '2', '--columns', '2', '--mines', '3']) == 1
    assert 'Too many mines' in capsys.readouterr().err


def test_survey_then_report(tmp_path, capsys):
    log_csv = tmp_path / 'survey.csv'
    assert survey.main(['--boards', '5', '--seed', '10', '--reveal-first', '--log_csv', str(log_csv)]) == 0
    with log_csv.open() as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 5
    assert [int(r['seed']) for r in rows] == [10, 11, 12, 13, 14]
    assert all(r['counts_consistent'] == 'True' for r in rows)
    assert all(int(r['mines']) == 10 for r in rows)

    out_md = tmp_path / 'REPORT.md'
    report.main(['--log_csv', str(log_csv), '--out', str(out_md)])
    text = out_md.read_text()
    assert text.startswith('# Survey Report')
    assert 'Boards: 5' in text
    assert 'Inconsistent boards: 0' in text


def test_survey_refuses_dense_board(tmp_path):
    log_csv = tmp_path / 'survey.csv'
    assert survey.main(['--rows', '2', '--columns', '2', '--mines', '2', '--log_csv', str(log_csv)]) == 1
    assert not log_csv.exists()


def test_report_without_rows():
    assert report.summarize([]) == "No survey rows found."


def test_report_skips_unparseable_cells():
    rows = [{'density': '0.1', 'revealed': 'abc', 'counts_consistent': 'True'},
            {'density': '', 'revealed': '4', 'counts_consistent': 'True'}]
    assert report.column(rows, 'density') == [0.1]
    assert report.column(rows, 'revealed') == [4.0]
    assert report.parse_number('None') is None


def test_log_board_writes_header_once(tmp_path):
    log_csv = tmp_path / 'nested' / 'survey.csv'
    row = {name: 0 for name in survey.HEADER}
    survey.log_board(log_csv, row)
    survey.log_board(log_csv, row)
    lines = log_csv.read_text().splitlines()
    assert lines[0] == ','.join(survey.HEADER)
    assert len(lines) == 3
