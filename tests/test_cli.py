# tests/test_cli.py

import pytest

from litcal import cli


def test_day_command(capsys):
    assert cli.main(["day", "2025-08-08"]) == 0
    out = capsys.readouterr().out
    assert "2025-08-08" in out
    assert "St. Dominic, Priest" in out
    assert "Ordinary Time" in out


def test_bare_date_is_day_command(capsys):
    assert cli.main(["2025-07-08", "--attr", "day_name"]) == 0
    out = capsys.readouterr().out
    assert "(ferial)" in out
    assert "day_name = Tuesday of the 5th Week of Ordinary Time" in out


def test_day_with_calendar_and_debug(capsys):
    assert cli.main(["day", "2025-11-07", "--calendar", "roman", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "All Saints of the Order" not in out
    assert "'ranking'" in out


def test_day_invalid_date(capsys):
    assert cli.main(["day", "2025-02-30"]) == 2
    assert "error:" in capsys.readouterr().err


def test_search_command(capsys):
    assert cli.main(["search", "Dominic", "--year", "2025"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("2025-05-24")
    assert out[1].startswith("2025-08-08")


def test_search_no_matches(capsys):
    assert cli.main(["search", "zzz", "--year", "2025"]) == 0
    assert "no matches" in capsys.readouterr().out


def test_month_command(capsys):
    assert cli.main(["month", "2025", "4"]) == 0
    out = capsys.readouterr().out
    assert "2025-04" in out
    assert "Mo     Tu" in out
    assert "Easter Sunday of the Resurrection" in out


def test_easter_table(capsys):
    assert cli.main(["easter-table", "--from-year", "2024", "--to-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "03-31" in out
    assert "04-20" in out


def test_easter_table_iso_and_columns(capsys):
    rc = cli.main(["easter-table", "--from-year", "2025", "--to-year", "2025",
                   "--dates", "iso", "--columns", "Whit=pentecost"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Whit" in out
    assert "2025-06-08" in out


def test_season_coverage(capsys):
    assert cli.main(["diag", "season-coverage", "--from-year", "1990", "--to-year", "2040", "--verbose"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("OK: 51 liturgical years")
    assert "ADVENT" in out


def test_easter_scatter_requires_extras():
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    from litcal.diagnostics import easter_scatter
    np = easter_scatter._need_numpy()
    years, y = easter_scatter.build_series(np, 2024, 2025)
    assert list(years) == [2024, 2025]
    assert list(y) == [10.0, 30.0]


def test_unknown_subcommand():
    with pytest.raises(SystemExit):
        cli.main(["frobnicate"])


@pytest.mark.parametrize("argv", [
    ["day", "2025-01-01", "--log-level", "INFO"],
    ["--log-level", "INFO", "day", "2025-01-01"],
    ["2025-01-01", "--log-level", "INFO"],
    ["search", "Dominic", "--year", "2025", "--log-level", "INFO"],
])
def test_log_level_accepted_anywhere(argv, caplog, capsys):
    caplog.set_level("DEBUG")
    assert cli.main(argv) == 0
    assert "Built 'dominican' calendar" in caplog.text
    capsys.readouterr()


def test_default_log_level_is_quiet(caplog, capsys):
    caplog.set_level("DEBUG")
    assert cli.main(["2025-01-01"]) == 0
    assert "Built" not in caplog.text
    capsys.readouterr()


def test_season_coverage_reaches_last_liturgical_year(capsys):
    assert cli.main(["diag", "season-coverage", "--from-year", "9998", "--to-year", "9999"]) == 0
    assert capsys.readouterr().out.startswith("OK: 2 liturgical years")
