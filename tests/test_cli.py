"""Tests for tsframe CLI (python -m tsframe)."""

from __future__ import annotations

import json
import subprocess
import sys

from tsframe.__main__ import main


def test_cli_version_via_main() -> None:
    """main(['version']) exits 0."""
    assert main(["version"]) == 0


def test_cli_doctor_via_main() -> None:
    """main(['doctor']) exits 0."""
    assert main(["doctor"]) == 0


def test_cli_describe_via_main() -> None:
    """main(['describe']) exits 0."""
    assert main(["describe"]) == 0


def test_cli_no_command_shows_help(capsys) -> None:
    """No subcommand prints help and exits 0."""
    ret = main([])
    assert ret == 0
    captured = capsys.readouterr()
    assert "tsframe" in captured.out


def test_cli_version_subprocess() -> None:
    """python -m tsframe version outputs version string."""
    import tsframe

    result = subprocess.run(
        [sys.executable, "-m", "tsframe", "version"],
        capture_output=True,
        text=True,
        timeout=30,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == tsframe.__version__


def test_cli_doctor_detects_core_deps(capsys) -> None:
    """Doctor output mentions core dependencies and a verdict."""
    main(["doctor"])
    captured = capsys.readouterr()
    assert "Core dependencies" in captured.out
    for dep in ["pandas", "numpy", "pydantic", "pytest"]:
        assert dep in captured.out
    assert "All systems go" in captured.out or "WARNING" in captured.out


def test_cli_describe_outputs_valid_json(capsys) -> None:
    """describe prints a JSON document."""
    main(["describe"])
    data = json.loads(capsys.readouterr().out)
    assert "version" in data
    assert "units" in data


def test_cli_endpoints_dates(capsys) -> None:
    """endpoints prints positions as JSON."""
    request = {
        "index": ["2024-01-30", "2024-01-31", "2024-02-01", "2024-02-29", "2024-03-01"],
        "on": "months",
        "kind": "date",
    }
    assert main(["endpoints", json.dumps(request)]) == 0
    assert json.loads(capsys.readouterr().out) == {"endpoints": [2, 4, 5]}


def test_cli_endpoints_unit_alias(capsys) -> None:
    """'unit' is accepted in place of 'on'."""
    request = {"index": ["2024-01-01T09:00", "2024-01-01T09:30", "2024-01-01T10:00"], "unit": "hours"}
    assert main(["endpoints", json.dumps(request)]) == 0
    assert json.loads(capsys.readouterr().out) == {"endpoints": [2, 3]}


def test_cli_endpoints_domain_error(capsys) -> None:
    """Library errors are reported as JSON on stderr."""
    request = {"index": ["2024-01-01"], "on": "days", "k": 0}
    assert main(["endpoints", json.dumps(request)]) == 2
    err = json.loads(capsys.readouterr().err)
    assert err["error_code"] == "E_DOMAIN"


def test_cli_endpoints_type_mismatch(capsys) -> None:
    """Plain integers cannot be bucketed by time units."""
    request = {"index": [1, 2, 3], "on": "years"}
    assert main(["endpoints", json.dumps(request)]) == 2
    err = json.loads(capsys.readouterr().err)
    assert err["error_code"] == "E_TYPE_MISMATCH"


def test_cli_endpoints_invalid_request(capsys) -> None:
    """Malformed requests fail validation."""
    assert main(["endpoints", json.dumps({"index": [1], "on": "days", "extra": 1})]) == 2
    err = json.loads(capsys.readouterr().err)
    assert err["error_code"] == "E_REQUEST_INVALID"


def test_cli_endpoints_malformed_date(capsys) -> None:
    """Dates that do not parse are reported as invalid requests."""
    request = {"index": ["2024-13-01"], "on": "months", "kind": "date"}
    assert main(["endpoints", json.dumps(request)]) == 2
    err = json.loads(capsys.readouterr().err)
    assert err["error_code"] == "E_REQUEST_INVALID"
