import pandas as pd

from pairwise_ranker.cli.__main__ import main


def test_cli_without_outcomes(capsys):
    assert main(["a", "b", "c", "--next", "2"]) == 0
    out = capsys.readouterr().out
    assert "Next comparisons:" in out
    assert "- a vs b" in out
    assert "- a vs c" in out
    assert "Session in progress: 0/3 pairs compared." in out


def test_cli_replays_outcomes(tmp_path, capsys):
    path = tmp_path / "outcomes.csv"
    pd.DataFrame({"winner": ["B"], "loser": ["A"]}).to_csv(path, index=False)
    assert main(["A", "B", "--outcomes", str(path), "--next", "3"]) == 0
    out = capsys.readouterr().out
    lines = [line.split() for line in out.splitlines() if line.strip()]
    assert lines[1][:3] == ["1", "B", "1.000"]
    assert lines[2][:3] == ["2", "A", "0.000"]
    assert "Next comparisons:" not in out
    assert "Session complete: 1/1 pairs compared." in out


def test_cli_reports_errors(tmp_path, capsys):
    path = tmp_path / "outcomes.csv"
    pd.DataFrame({"winner": ["A"], "loser": ["Q"]}).to_csv(path, index=False)
    assert main(["A", "B", "--outcomes", str(path)]) == 2
    assert "Unknown item" in capsys.readouterr().err


def test_cli_rejects_single_item(capsys):
    assert main(["A"]) == 2
    assert "at least two items" in capsys.readouterr().err


def test_cli_rejects_invalid_config(capsys):
    assert main(["A", "B", "--k-factor", "nan"]) == 2
    assert "k_factor" in capsys.readouterr().err
