"""CLI entrypoint."""

from __future__ import annotations

import json
from pathlib import Path

from greenpath.cli import main

_FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "catalog_da_nang.json"


def test_cli_prints_package_summary(capsys):
    code = main(["--transport", "t2", "--lodging", "h1", "--activity", "r1"])

    out = capsys.readouterr().out
    assert code == 0
    assert "168 carbon credits earned  |  $340 USD  |  -56% CO₂" in out
    assert "Trip footprint: 172 kg" in out


def test_cli_json_output_with_challenges(capsys):
    code = main(["--challenge", "c3", "--challenge", "c2", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["xp"] == 1200
    assert payload["totals"]["total_price"] == 0


def test_cli_start_xp_flag(capsys):
    assert main(["--start-xp", "100", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["xp"] == 100


def test_cli_uses_catalog_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("GREENPATH_CATALOG_PATH", str(_FIXTURE))

    assert main(["--lodging", "eco", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["destination"] == "Da Nang, Vietnam"
    assert payload["totals"]["total_emissions"] == 13


def test_cli_unknown_option_exits_with_error(capsys):
    code = main(["--transport", "t9"])

    err = capsys.readouterr().err
    assert code == 2
    assert "unknown transport option: t9" in err


def test_cli_invalid_start_xp_exits_with_error(capsys):
    assert main(["--start-xp", "-5"]) == 2
    assert "start xp" in capsys.readouterr().err


def test_cli_bad_catalog_exits_with_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text('{"transports": [{"id": "x", "title": "X"}]}', encoding="utf-8")

    assert main(["--catalog", str(path)]) == 2
    assert "invalid catalog" in capsys.readouterr().err
