"""Tests for tsframe.describe() API discovery function."""

from __future__ import annotations

import json

from tsframe.discovery import describe


def test_describe_returns_dict() -> None:
    """describe() returns a dictionary."""
    result = describe()
    assert isinstance(result, dict)


def test_describe_has_expected_top_level_keys() -> None:
    """Result has version, apis, error_codes, units, endpoint_request."""
    result = describe()
    expected_keys = {"version", "apis", "error_codes", "units", "endpoint_request"}
    assert expected_keys.issubset(result.keys())


def test_describe_version_matches_package() -> None:
    """version field matches tsframe.__version__."""
    import tsframe

    result = describe()
    assert result["version"] == tsframe.__version__


def test_describe_error_codes_contains_registry() -> None:
    """error_codes contains all entries from ERROR_REGISTRY."""
    from tsframe.core.errors import ERROR_REGISTRY

    result = describe()
    error_codes = result["error_codes"]

    for code in ERROR_REGISTRY:
        assert code in error_codes, f"Missing error code: {code}"
        assert "class" in error_codes[code]
        assert "description" in error_codes[code]
        assert "fix_hint" in error_codes[code]


def test_describe_error_codes_fix_hints() -> None:
    """Error codes with class-level fix_hints are correctly populated."""
    error_codes = describe()["error_codes"]
    assert "sort" in error_codes["E_INDEX_UNSORTED"]["fix_hint"].lower()
    assert error_codes["E_TYPE_MISMATCH"]["class"] == "ETypeMismatch"


def test_describe_units_grouped_by_class() -> None:
    """units lists calendar and fixed-duration names."""
    units = describe()["units"]
    assert units["calendar"] == ["years", "quarters", "months", "weeks"]
    assert units["fixed"][0] == "days"
    assert units["fixed"][-1] == "nanoseconds"


def test_describe_apis_contain_core_functions() -> None:
    """apis includes the core operations."""
    apis = describe()["apis"]
    for task in ["build_frame", "endpoints", "period_ends", "isregular", "describe"]:
        assert task in apis, f"Missing API task: {task}"
        assert "function" in apis[task]
        assert "description" in apis[task]


def test_describe_endpoint_request_schema() -> None:
    """endpoint_request is the request JSON schema."""
    schema = describe()["endpoint_request"]
    assert "on" in schema["properties"]
    assert "on" in schema["required"]


def test_describe_is_json_serializable() -> None:
    """The whole result serializes to JSON."""
    json.dumps(describe())
