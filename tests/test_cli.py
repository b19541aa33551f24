# tests/test_cli.py

import pytest

from calhijri.cli import main


def test_g2h(capsys):
    assert main(["g2h", "2025-06-26"]) == 0
    out = capsys.readouterr().out
    assert "1447-01-01" in out
    assert "1 Muharram 1447 AH" in out
    assert "[SA ummalqura +0]" in out


def test_bare_date_is_g2h(capsys):
    assert main(["2025-06-26", "--country", "MA"]) == 0
    out = capsys.readouterr().out
    assert "1446-12-29" in out
    assert "[MA moonsighting_national -1]" in out


def test_h2g(capsys):
    assert main(["h2g", "1447-09-01"]) == 0
    out = capsys.readouterr().out
    assert "2026-02-18" in out
    assert "Wednesday" in out

    assert main(["h2g", "1447/9/1", "--country", "PK"]) == 0
    assert "2026-02-19" in capsys.readouterr().out


def test_out_of_range_exit_code(capsys):
    assert main(["g2h", "1990-01-01"]) == 2
    err = capsys.readouterr().err
    assert "OUT_OF_RANGE" in err


def test_unknown_country_exit_code(capsys):
    assert main(["g2h", "2025-06-26", "--country", "ZZ"]) == 2
    assert "INVALID_INPUT" in capsys.readouterr().err


def test_malformed_date_exits():
    with pytest.raises(SystemExit):
        main(["g2h", "2025-6-26x"])


def test_today(capsys):
    assert main(["today"]) == 0
    assert "AH" in capsys.readouterr().out


def test_range(capsys):
    assert main(["range"]) == 0
    out = capsys.readouterr().out
    assert "1423 .. 1500 AH" in out
    assert "2002-03-15 .. 2077-11-16" in out
    assert "936" in out


def test_profiles(capsys):
    assert main(["profiles", "--method", "diyanet"]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 1 and out[0].startswith("TR")

    assert main(["profiles"]) == 0
    assert "Saudi Arabia" in capsys.readouterr().out


def test_month(capsys):
    assert main(["month", "1447", "9"]) == 0
    out = capsys.readouterr().out
    assert "Ramadan 1447 AH" in out
    assert "30 days from 2026-02-18" in out


def test_diag_check_table(capsys):
    assert main(["diag", "check-table"]) == 0
    out = capsys.readouterr().out
    assert "months       : 936" in out
    assert "30-day months: 497" in out


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "200", "--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert "offset -2: 200 trials, 0 failures" in out
    assert "offset +2: 200 trials, 0 failures" in out
