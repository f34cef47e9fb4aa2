"""
eventlayout Integration Tests

Runs the layout and check subcommands end to end on small events files.

Run: pytest eventlayout/tests/integration/ -v
"""
import sys
from argparse import Namespace
from datetime import date, time

import pandas as pd
import pytest
from eventlayout.__main__ import main
from eventlayout.cli import check, layout


def make_args(input_file, **overrides):
    """Namespace matching what argparse would create"""
    args = dict(
        input=str(input_file),
        date=None,
        day_start=time(0, 0),
        day_end=None,
        timezone='UTC',
        tie_break='id',
        lenient=False,
        debug=False,
    )
    args.update(overrides)
    return Namespace(**args)


@pytest.mark.integration
def test_layout_writes_all_events(events_tsv, tmp_path):
    """Without --date every event of the file is laid out"""
    output = tmp_path / "layouts.tsv"
    layout.run(make_args(events_tsv, output=str(output)))

    df = pd.read_csv(output, sep='\t', comment='#')
    assert list(df['id']) == ['a', 'b', 'c', 'd']
    assert list(df['base_column']) == [0, 1, 0, 0]


@pytest.mark.integration
def test_layout_with_day_window(events_tsv, tmp_path):
    """--date keeps only the events visible in the window"""
    output = tmp_path / "layouts.tsv"
    layout.run(make_args(
        events_tsv, output=str(output),
        date=date(2024, 1, 1), day_start=time(9, 15), day_end=time(18, 0),
    ))

    df = pd.read_csv(output, sep='\t', comment='#')
    assert list(df['id']) == ['a', 'b', 'c']
    assert output.read_text().startswith("# clusters=2")


@pytest.mark.integration
def test_check_passes(events_tsv):
    """Engine output has no violations"""
    assert check.run(make_args(events_tsv)) == 0


@pytest.mark.integration
def test_check_rejects_duplicates(tmp_path):
    """Strict mode fails on duplicate ids, lenient mode drops them"""
    path = tmp_path / "dupes.tsv"
    path.write_text(
        "id\tstart\tend\n"
        "a\t2024-01-01T09:00:00Z\t2024-01-01T10:00:00Z\n"
        "a\t2024-01-01T09:30:00Z\t2024-01-01T10:30:00Z\n"
    )
    with pytest.raises(ValueError, match="Duplicate"):
        check.run(make_args(path))
    assert check.run(make_args(path, lenient=True)) == 0


@pytest.mark.integration
def test_main_layout_command(events_tsv, tmp_path, monkeypatch):
    """Console entry point dispatches to the layout subcommand"""
    output = tmp_path / "layouts.tsv"
    monkeypatch.setattr(sys, 'argv', [
        'eventlayout', 'layout', '-i', str(events_tsv), '-o', str(output),
        '--date', '2024-01-02',
    ])
    main()

    df = pd.read_csv(output, sep='\t', comment='#')
    assert list(df['id']) == ['d']


@pytest.mark.integration
def test_main_without_command_exits(monkeypatch):
    """No subcommand prints help and exits with status 1"""
    monkeypatch.setattr(sys, 'argv', ['eventlayout'])
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 1
