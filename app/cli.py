"""
Command-line interface for netsolve.

Validate netlists, export solver payloads, and submit netlists to the solver
without a browser.

Usage::

    python -m cli examples
    python -m cli validate divider.json
    python -m cli export --example ponte --output ponte_payload.json
    python -m cli solve divider.json
    python -m cli solve --example amp --format csv --output amp.csv
    python -m cli batch netlists/ --output-dir results/
    python -m cli repl --load divider.json
"""

import argparse
import glob
import json
import logging
import sys
from pathlib import Path

from controllers.example_manager import ExampleManager
from controllers.file_controller import netlist_from_data, validate_netlist_data
from controllers.netlist_controller import NetlistController
from controllers.solve_controller import SolveController
from models.netlist import NetlistModel
from solver.config import SolverSettings
from solver.csv_exporter import export_solver_results
from solver.solver_client import SolverClient

__version__ = "0.3.0"


def try_load_netlist(filepath: str) -> tuple[NetlistModel | None, str]:
    """Load and validate a netlist JSON file without exiting.

    Returns:
        (model, "") on success, or (None, error_message) on failure.
    """
    path = Path(filepath)
    if not path.exists():
        return None, f"file not found: {filepath}"

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        return None, f"invalid JSON in {filepath}: {e}"

    try:
        validate_netlist_data(data)
    except ValueError as e:
        return None, f"invalid netlist file: {e}"

    return netlist_from_data(data), ""


def load_netlist(filepath: str) -> NetlistModel:
    """Load and validate a netlist JSON file.

    Raises:
        SystemExit: On file read or validation errors.
    """
    model, error = try_load_netlist(filepath)
    if model is None:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)
    return model


def load_source(args: argparse.Namespace) -> tuple[NetlistModel, str]:
    """Resolve the netlist named on the command line (file or --example).

    Returns:
        (model, display_name)

    Raises:
        SystemExit: If neither or both sources are given, or loading fails.
    """
    example = getattr(args, "example", None)
    netlist = getattr(args, "netlist", None)
    if bool(example) == bool(netlist):
        print("Error: give either a netlist file or --example KEY", file=sys.stderr)
        sys.exit(1)

    if netlist:
        return load_netlist(netlist), Path(netlist).stem

    controller = NetlistController()
    if not ExampleManager().load_example(example, controller):
        print(f"Error: unknown example '{example}'", file=sys.stderr)
        sys.exit(1)
    return controller.model, example


def build_client(args: argparse.Namespace) -> SolverClient:
    """Create a SolverClient from the environment plus command-line overrides."""
    settings = SolverSettings()
    if getattr(args, "api_url", None):
        settings.api_url = args.api_url
    if getattr(args, "timeout", None) is not None:
        settings.timeout = args.timeout
    if getattr(args, "unique_names", False):
        settings.require_unique_names = True
    return SolverClient(settings)


def cmd_examples(args: argparse.Namespace) -> int:
    """List available example netlists."""
    for example in ExampleManager().list_examples():
        origin = "built-in" if example.builtin else "user"
        print(f"{example.key:<12} {example.title:<24} {len(example.components):>2} components  ({origin})")
        if example.description:
            print(f"{'':<12} {example.description}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a netlist without submitting it."""
    model, name = load_source(args)
    sim = SolveController(model, require_unique_names=args.unique_names or None)

    result = sim.validate_netlist()

    if result.success:
        print(f"Netlist is valid: {name}")
        for warning in result.warnings:
            print(f"  Warning: {warning}")
        return 0
    else:
        print(f"Netlist has errors: {name}", file=sys.stderr)
        for err in result.errors:
            print(f"  - {err}", file=sys.stderr)
        return 1


def cmd_export(args: argparse.Namespace) -> int:
    """Export the solver payload (or the netlist document) as JSON."""
    model, _ = load_source(args)

    if args.format == "payload":
        sim = SolveController(model)
        output_text = json.dumps(sim.generate_payload(), indent=2, ensure_ascii=False)
    else:
        output_text = json.dumps(model.to_dict(), indent=2, ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(output_text, encoding="utf-8")
        print(f"{args.format.capitalize()} written to {args.output}", file=sys.stderr)
    else:
        print(output_text)
    return 0


def cmd_solve(args: argparse.Namespace) -> int:
    """Submit a netlist to the solver and output the results."""
    model, name = load_source(args)
    sim = SolveController(model, client=build_client(args))

    result = sim.solve()

    if not result.success:
        if result.error_kind == "validation":
            print("Submission blocked by validation errors:", file=sys.stderr)
            for err in result.errors:
                print(f"  - {err}", file=sys.stderr)
        else:
            print(f"Solve failed: {result.error}", file=sys.stderr)
        return 1

    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    if args.format == "xlsx":
        if not args.output:
            print("Error: --output is required for xlsx format", file=sys.stderr)
            return 1
        from solver.excel_exporter import export_to_excel

        export_to_excel(result.data, args.output, name)
        print(f"Results written to {args.output}", file=sys.stderr)
        return 0

    output_text = _format_result(result, args.format, name)

    if args.output:
        Path(args.output).write_text(output_text, encoding="utf-8")
        print(f"Results written to {args.output}", file=sys.stderr)
    else:
        print(output_text)

    return 0


def _format_result(result, fmt: str, netlist_name: str = "") -> str:
    """Format a successful solve result as text."""
    if fmt == "csv":
        return export_solver_results(result.data, netlist_name)
    return _result_to_json(result)


def _result_to_json(result) -> str:
    """Format solve result as JSON."""
    output = {
        "success": result.success,
        "data": result.data.to_dict() if result.data is not None else None,
    }
    if result.warnings:
        output["warnings"] = result.warnings
    if result.payload:
        output["payload"] = result.payload
    return json.dumps(output, indent=2, ensure_ascii=False, default=str)


def cmd_batch(args: argparse.Namespace) -> int:
    """Submit every netlist file in a directory or glob, one after another."""
    pattern = args.path
    path = Path(pattern)
    if path.is_dir():
        files = sorted(path.glob("*.json"))
    elif "*" in pattern or "?" in pattern:
        files = sorted(Path(p) for p in glob.glob(pattern))
    else:
        print(f"Error: {pattern} is not a directory or glob pattern", file=sys.stderr)
        return 1

    if not files:
        print(f"No .json netlist files found matching: {pattern}", file=sys.stderr)
        return 1

    output_dir = None
    if args.output_dir:
        output_dir = Path(args.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    client = build_client(args)
    results_summary = []
    any_failed = False

    for filepath in files:
        name = filepath.stem
        model, error = try_load_netlist(str(filepath))

        if model is None:
            results_summary.append({"file": filepath.name, "status": "LOAD_ERROR", "error": error})
            any_failed = True
            if args.fail_fast:
                break
            continue

        result = SolveController(model, client=client).solve()

        if not result.success:
            results_summary.append({"file": filepath.name, "status": "FAIL", "error": result.error})
            any_failed = True
            if args.fail_fast:
                break
            continue

        results_summary.append(
            {
                "file": filepath.name,
                "status": "OK",
                "details": f"{len(result.data.results)} result(s)",
            }
        )

        if output_dir:
            ext = "csv" if args.format == "csv" else "json"
            out_path = output_dir / f"{name}.{ext}"
            out_path.write_text(_format_result(result, args.format, name), encoding="utf-8")

    # Print summary table
    print(f"\n{'File':<40} {'Status':<12} {'Details'}")
    print("-" * 70)
    for entry in results_summary:
        status = entry["status"]
        details = entry.get("details", entry.get("error", ""))
        print(f"{entry['file']:<40} {status:<12} {details}")

    total = len(results_summary)
    passed = sum(1 for e in results_summary if e["status"] == "OK")
    failed = total - passed
    print(f"\n{passed}/{total} succeeded, {failed} failed")

    return 1 if any_failed else 0


REPL_BANNER = """\
netsolve Interactive REPL
=========================

Available objects:
  Netlist          - create and manipulate netlists
  SolveResult      - solve result type
  COMPONENT_TYPES  - list of all supported component types
  EXAMPLES         - keys of the built-in examples

Quick start:
  n = Netlist()
  n.add_component("VoltageSource", "10", nodes=(1, 0))
  n.add_component("Resistor", "1k", nodes=(1, 2))
  n.add_component("Resistor", "1k", nodes=(2, 0))
  print(n.to_json())
  result = n.solve()
"""


def build_repl_namespace(load_path: str | None = None) -> dict:
    """Build the namespace dict for the interactive REPL.

    Args:
        load_path: Optional path to a netlist JSON file to pre-load.
    """
    from controllers.example_manager import BUILTIN_EXAMPLES
    from controllers.solve_controller import SolveResult
    from models.component import COMPONENT_TYPES
    from scripting.netlist import Netlist

    namespace = {
        "Netlist": Netlist,
        "SolveResult": SolveResult,
        "COMPONENT_TYPES": COMPONENT_TYPES,
        "EXAMPLES": list(BUILTIN_EXAMPLES),
    }

    if load_path:
        model, error = try_load_netlist(load_path)
        if model is None:
            print(f"Warning: could not load {load_path}: {error}", file=sys.stderr)
        else:
            namespace["netlist"] = Netlist(model)
            print(f"Loaded netlist from {load_path} as 'netlist'", file=sys.stderr)

    return namespace


def cmd_repl(args: argparse.Namespace) -> int:
    """Launch an interactive Python REPL with the scripting API."""
    namespace = build_repl_namespace(getattr(args, "load", None))

    try:
        from IPython import start_ipython

        start_ipython(argv=[], user_ns=namespace, display_banner=False)
        return 0
    except ImportError:
        pass

    import code

    code.interact(banner=REPL_BANNER, local=namespace)
    return 0


def positive_float(text: str) -> float:
    """argparse type for values that must be greater than zero."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {text}")
    return value


def _add_source_arguments(parser):
    parser.add_argument("netlist", nargs="?", help="Path to netlist JSON file")
    parser.add_argument("--example", "-e", help="Use a built-in or user example instead of a file")


def _add_solver_arguments(parser):
    parser.add_argument("--api-url", help="Solver endpoint (default: $NETSOLVE_API_URL or the public solver)")
    parser.add_argument("--timeout", type=positive_float, help="Request timeout in seconds (default: 60)")
    parser.add_argument(
        "--unique-names", action="store_true", help="Reject netlists that reuse a component name"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="netsolve",
        description="netsolve: build, validate and submit circuit netlists to the solver from the command line.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log request details to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # examples
    subparsers.add_parser("examples", help="List example netlists")

    # validate
    val_parser = subparsers.add_parser("validate", help="Check a netlist for errors without submitting")
    _add_source_arguments(val_parser)
    val_parser.add_argument(
        "--unique-names", action="store_true", help="Treat repeated component names as errors"
    )

    # export
    exp_parser = subparsers.add_parser("export", help="Export the solver payload or the netlist document")
    _add_source_arguments(exp_parser)
    exp_parser.add_argument(
        "--format",
        "-f",
        choices=["payload", "netlist"],
        default="payload",
        help="payload: records sent to the solver; netlist: editable document (default: payload)",
    )
    exp_parser.add_argument("--output", "-o", help="Write output to file instead of stdout")

    # solve
    solve_parser = subparsers.add_parser("solve", help="Submit a netlist to the solver and output results")
    _add_source_arguments(solve_parser)
    solve_parser.add_argument(
        "--format", choices=["json", "csv", "xlsx"], default="json", help="Output format (default: json)"
    )
    solve_parser.add_argument("--output", "-o", help="Write results to file instead of stdout")
    _add_solver_arguments(solve_parser)

    # batch
    batch_parser = subparsers.add_parser("batch", help="Submit multiple netlist files")
    batch_parser.add_argument("path", help="Directory or glob pattern matching netlist JSON files")
    batch_parser.add_argument(
        "--format", choices=["json", "csv"], default="json", help="Output format for per-file results (default: json)"
    )
    batch_parser.add_argument("--output-dir", help="Write per-file results to this directory")
    batch_parser.add_argument("--fail-fast", action="store_true", help="Stop on first error")
    _add_solver_arguments(batch_parser)

    # repl
    repl_parser = subparsers.add_parser("repl", help="Launch interactive Python REPL with scripting API")
    repl_parser.add_argument("--load", help="Pre-load a netlist JSON file as 'netlist' variable")

    return parser


def main(argv=None) -> int:
    """CLI entry point. Returns exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    handlers = {
        "examples": cmd_examples,
        "validate": cmd_validate,
        "export": cmd_export,
        "solve": cmd_solve,
        "batch": cmd_batch,
        "repl": cmd_repl,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
