"""API discovery and introspection for tsframe.

Provides ``describe()`` which returns a machine-readable schema of the
library's public surface: version, stable APIs, error codes with fix
hints, recognized unit names and the endpoints request schema.

Usage:
    >>> from tsframe.discovery import describe
    >>> info = describe()
    >>> info["units"]["calendar"]
    ['years', 'quarters', 'months', 'weeks']
"""

from __future__ import annotations

from typing import Any


def describe() -> dict[str, Any]:
    """Return a machine-readable API schema for tsframe.

    Returns a dictionary with:
      - ``version``: library version string
      - ``apis``: mapping of task names to primary API functions
      - ``error_codes``: mapping of error codes to class/description/fix_hint
      - ``units``: recognized unit names grouped by class
      - ``endpoint_request``: JSON schema of ``EndpointRequest``
    """
    import tsframe
    from tsframe.contracts import EndpointRequest

    return {
        "version": tsframe.__version__,
        "apis": _get_apis(),
        "error_codes": _get_error_codes(),
        "units": _get_units(),
        "endpoint_request": EndpointRequest.model_json_schema(),
    }


def _get_apis() -> dict[str, dict[str, str]]:
    """Return stable API surface."""
    return {
        "build_frame": {
            "function": "build_frame / TSFrame.from_values / TSFrame.from_dataframe",
            "description": "Construct an immutable TSFrame with a sorted index",
        },
        "endpoints": {
            "function": "endpoints",
            "description": "1-based positions closing each period bucket of an index",
        },
        "period_ends": {
            "function": "TSFrame.period_ends",
            "description": "Rows of a TSFrame at the end of each period",
        },
        "isregular": {
            "function": "isregular",
            "description": "Check that index values are evenly spaced",
        },
        "describe": {
            "function": "TSFrame.describe",
            "description": "Per-column summary statistics",
        },
        "apply": {
            "function": "TSFrame.apply",
            "description": "Elementwise function over every data column",
        },
        "rename": {
            "function": "TSFrame.rename",
            "description": "Rename data columns; the index name is reserved",
        },
    }


def _get_error_codes() -> dict[str, dict[str, str]]:
    from tsframe.core.errors import ERROR_REGISTRY

    result: dict[str, dict[str, str]] = {}
    for code, cls in ERROR_REGISTRY.items():
        doc = (cls.__doc__ or "").strip().split("\n")[0]
        result[code] = {
            "class": cls.__name__,
            "description": doc,
            "fix_hint": cls.fix_hint,
        }
    return result


def _get_units() -> dict[str, list[str]]:
    from tsframe.time.units import TimeUnit, UnitClass

    return {
        unit_class.value: [u.value for u in TimeUnit if u.unit_class is unit_class]
        for unit_class in UnitClass
    }


__all__ = ["describe"]
