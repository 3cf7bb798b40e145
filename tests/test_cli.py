"""Tests for the command-line entry point."""

import io
import json

from allocura.cli import EXIT_INVALID_PROFILE, EXIT_OK, _flag, run

STEADY_ARGS = [
    "--age-group", "26-35",
    "--employment-type", "salaried",
    "--income-stability", "stable",
    "--monthly-investment", "5000",
    "--existing-emis", "none",
    "--emergency-fund", "strong",
    "--investment-horizon", "long",
    "--risk-comfort", "medium",
    "--tax-awareness", "yes",
    "--gold-preference", "no",
]


def test_flag_names():
    assert _flag("ageGroup") == "--age-group"
    assert _flag("existingEMIs") == "--existing-emis"
    assert _flag("monthlyInvestment") == "--monthly-investment"


def test_text_report():
    out = io.StringIO()
    assert run(STEADY_ARGS, out=out) == EXIT_OK
    text = out.getvalue()
    assert "Equity ETFs: 60%" in text
    assert "SIP Projection" in text


def test_json_payload():
    out = io.StringIO()
    assert run(STEADY_ARGS + ["--json"], out=out) == EXIT_OK
    payload = json.loads(out.getvalue())
    assert payload["allocation"] == {
        "equityETF": 60,
        "debtFunds": 20,
        "liquidFunds": 10,
        "goldETF": 10,
        "reits": 0,
    }


def test_answers_file_and_flag_override(tmp_path):
    answers = tmp_path / "answers.json"
    answers.write_text(json.dumps({"ageGroup": "18-25", "riskComfort": "high"}), encoding="utf-8")
    out = io.StringIO()
    assert run(["--answers", str(answers), "--age-group", "46-55", "--json"], out=out) == EXIT_OK
    payload = json.loads(out.getvalue())
    assert payload["trace"][0] == "age:46-55"
    assert "risk:high" in payload["trace"]


def test_strict_mode_rejects_bad_answer(capsys):
    args = [a if a != "26-35" else "26-40" for a in STEADY_ARGS]
    assert run(args + ["--strict"], out=io.StringIO()) == EXIT_INVALID_PROFILE
    assert "ageGroup='26-40'" in capsys.readouterr().err


def test_lenient_mode_reports_and_continues():
    args = [a if a != "26-35" else "26-40" for a in STEADY_ARGS]
    out = io.StringIO()
    assert run(args + ["--json"], out=out) == EXIT_OK
    payload = json.loads(out.getvalue())
    assert payload["trace"][0] == "age:default"
    assert payload["warnings"]


def test_output_file(tmp_path):
    target = tmp_path / "report.txt"
    out = io.StringIO()
    assert run(STEADY_ARGS + ["-o", str(target)], out=out) == EXIT_OK
    assert "Report saved" in out.getvalue()
    assert "Recommended Asset Allocation" in target.read_text(encoding="utf-8")


def test_interactive_session():
    replies = iter(["9", "2", "1", "stable", "6", "7500", "1", "4", "3", "2", "1", "2"])
    out = io.StringIO()
    assert run(["--interactive", "--json"], input_fn=lambda prompt: next(replies), out=out) == EXIT_OK
    text = out.getvalue()
    assert "[1/10] What's your age group?" in text
    assert "Please pick one of the options." in text
    payload = json.loads(text[text.index("\n{") + 1:])
    assert payload["allocation"]["equityETF"] == 60
    assert payload["sip"]["monthlyAmount"] == 7500


def test_missing_answers_file(tmp_path, capsys):
    missing = tmp_path / "nope.json"
    assert run(["--answers", str(missing)], out=io.StringIO()) == EXIT_INVALID_PROFILE
    assert "Could not read answers" in capsys.readouterr().err


def test_malformed_answers_file(tmp_path, capsys):
    path = tmp_path / "answers.json"
    path.write_text("{not json", encoding="utf-8")
    assert run(["--answers", str(path)], out=io.StringIO()) == EXIT_INVALID_PROFILE
    assert "Could not read answers" in capsys.readouterr().err


def test_json_payload_without_sip_when_settings_out_of_range(monkeypatch):
    monkeypatch.setenv("ALLOCURA_SIP_RETURN_PCT", "40")
    out = io.StringIO()
    assert run(STEADY_ARGS + ["--json"], out=out) == EXIT_OK
    assert json.loads(out.getvalue())["sip"] is None
