"""CLI entry point for tsframe.

Enables ``python -m tsframe <command>`` usage.

Subcommands:
    doctor    - Environment check: core dependency versions.
    describe  - Machine-readable API schema (JSON to stdout).
    version   - Print tsframe version.
    endpoints - Endpoint positions for a JSON EndpointRequest.
"""

from __future__ import annotations

import argparse
import importlib
import json
import sys


def _check_import(module_name: str) -> tuple[bool, str | None]:
    """Try importing a module and return (success, version_or_none)."""
    try:
        mod = importlib.import_module(module_name)
        version = getattr(mod, "__version__", getattr(mod, "VERSION", None))
        return True, str(version) if version is not None else "installed"
    except ImportError:
        return False, None


def _cmd_doctor() -> int:
    """Run environment diagnostics."""
    import tsframe

    print(f"tsframe {tsframe.__version__}")
    print(f"Python {sys.version}")
    print()

    core_deps = [
        ("numpy", "numpy"),
        ("pandas", "pandas"),
        ("pydantic", "pydantic"),
    ]

    print("Core dependencies:")
    all_core_ok = True
    for display_name, module_name in core_deps:
        ok, version = _check_import(module_name)
        status = f"  {version}" if ok else "  NOT INSTALLED"
        marker = "ok" if ok else "MISSING"
        print(f"  [{marker:>7s}] {display_name}{status}")
        if not ok:
            all_core_ok = False

    print()

    print("Test tier (pip install tsframe[test]):")
    ok, version = _check_import("pytest")
    status = f"  {version}" if ok else "  not installed"
    marker = "ok" if ok else "---"
    print(f"  [{marker:>7s}] pytest{status}")

    print()

    if all_core_ok:
        print("All systems go.")
    else:
        print("WARNING: Some core dependencies are missing. Install with:")
        print("  pip install tsframe")

    return 0


def _cmd_describe() -> int:
    """Print machine-readable API schema as JSON."""
    from tsframe.discovery import describe

    info = describe()
    json.dump(info, sys.stdout, indent=2, default=str)
    print()  # trailing newline
    return 0


def _cmd_version() -> int:
    """Print version string."""
    import tsframe

    print(tsframe.__version__)
    return 0


def _cmd_endpoints(payload: str) -> int:
    """Validate a JSON EndpointRequest and print its endpoints."""
    from pydantic import ValidationError

    from tsframe.contracts import EndpointRequest
    from tsframe.core.errors import TSFrameError
    from tsframe.time import endpoints

    try:
        request = EndpointRequest.model_validate_json(payload)
        result = endpoints(request.index_values(), request.on, request.k)
    except ValidationError as exc:
        json.dump({"error_code": "E_REQUEST_INVALID", "message": str(exc)}, sys.stderr)
        print(file=sys.stderr)
        return 2
    except TSFrameError as exc:
        json.dump(exc.to_agent_dict(), sys.stderr, default=str)
        print(file=sys.stderr)
        return 2

    json.dump({"endpoints": result}, sys.stdout)
    print()
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="tsframe",
        description="tsframe - time-indexed tables with period endpoints",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("doctor", help="Environment check: core dependencies")
    subparsers.add_parser("describe", help="Machine-readable API schema (JSON)")
    subparsers.add_parser("version", help="Print version")
    endpoints_parser = subparsers.add_parser(
        "endpoints", help="Endpoint positions for a JSON request"
    )
    endpoints_parser.add_argument(
        "request",
        help='JSON EndpointRequest, e.g. \'{"index": ["2024-01-31", "2024-02-01"], "on": "months"}\'',
    )

    args = parser.parse_args(argv)

    if args.command == "doctor":
        return _cmd_doctor()
    elif args.command == "describe":
        return _cmd_describe()
    elif args.command == "version":
        return _cmd_version()
    elif args.command == "endpoints":
        return _cmd_endpoints(args.request)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
