from __future__ import annotations

import json

import pytest

from cli import main


def test_default_run_prints_picks_and_swap(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("#1 Stag's Leap Artemis")
    assert "85% Match" in out
    assert "swap: Ridge Geyserville" in out


def test_json_output(capsys):
    assert main(["--json", "--add-on", "Blue Cheese"]) == 0
    body = json.loads(capsys.readouterr().out)
    assert len(body["recommendations"]) == 3
    assert all(not r["is_swap_suggestion"] for r in body["recommendations"])


def test_nothing_affordable(capsys):
    assert main(["--budget-max", "10"]) == 0
    assert "Geen wijnen" in capsys.readouterr().out


def test_nothing_affordable_json(capsys):
    assert main(["--json", "--budget-max", "10"]) == 0
    assert json.loads(capsys.readouterr().out) == {"recommendations": [], "swap_suggestion": None}


@pytest.mark.parametrize(
    "argv",
    [
        ["--tannin", "11"],
        ["--budget-min", "300", "--budget-max", "100"],
        ["--cut", "Wagyu"],
    ],
)
def test_invalid_input_exits_with_usage_error(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
