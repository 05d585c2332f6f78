"""Command-line interface for loxscan."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from loxscan.debug import dump_tokens, tokens_to_json
from loxscan.errors import ErrorReporter
from loxscan.scanner import ScanResult, scan

FORMATS = ("text", "json")

# sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    script: Path | None
    format: str
    debug: bool
    quiet: bool
    show_source: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="loxscan",
        description="Scan Lox source into tokens",
    )
    p.add_argument("script", nargs="?", help="Lox script (default: interactive prompt)")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Token output format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover loxscan.toml)",
    )
    p.add_argument(
        "-q", "--quiet", action="store_true", default=None, help="Suppress error reports"
    )
    p.add_argument(
        "--show-source",
        action="store_true",
        default=None,
        help="Show the offending source line under each error",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / "loxscan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    script = Path(args.script) if args.script else None
    search_dir = script.parent if script is not None else Path(".")
    if not search_dir.parts:
        search_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir)

    fmt = "text"
    cfg_format = config.get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise argparse.ArgumentTypeError(
                f"invalid format in config (expected one of {', '.join(FORMATS)}): {cfg_format}"
            )
        fmt = cfg_format
    if args.format is not None:
        fmt = args.format

    quiet = _config_bool(config, "quiet")
    if args.quiet is not None:
        quiet = args.quiet

    show_source = _config_bool(config, "show_source")
    if args.show_source is not None:
        show_source = args.show_source

    return CliOptions(
        script=script,
        format=fmt,
        debug=args.debug,
        quiet=quiet,
        show_source=show_source,
    )


def _config_bool(config: dict[str, Any], key: str) -> bool:
    value = config.get(key, False)
    if not isinstance(value, bool):
        raise argparse.ArgumentTypeError(f"invalid {key} in config (expected true/false): {value}")
    return value


def run(source: str, options: CliOptions, *, out: TextIO, filename: str = "<script>") -> ScanResult:
    """Scan one unit of source and write its tokens to *out*."""
    reporter = ErrorReporter(source, file=None if options.quiet else sys.stderr)
    result = scan(source, reporter)

    if options.show_source:
        for err in result.errors:
            print(err.format(filename), file=sys.stderr)

    if options.debug:
        dump_tokens(result.tokens)

    if options.format == "json":
        out.write(json.dumps(tokens_to_json(result.tokens), indent=2) + "\n")
    else:
        for tok in result.tokens:
            out.write(f"{tok}\n")

    return result


def run_file(options: CliOptions) -> int:
    assert options.script is not None
    try:
        source = options.script.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.script}: {exc}", file=sys.stderr)
        return EX_NOINPUT

    result = run(source, options, out=sys.stdout, filename=str(options.script))
    return EX_OK if result.ok else EX_DATAERR


def run_prompt(options: CliOptions, *, stdin: TextIO | None = None) -> int:
    """Read-scan-print loop; each line is scanned on its own until end of input."""
    inp = stdin if stdin is not None else sys.stdin
    while True:
        sys.stdout.write("lox> ")
        sys.stdout.flush()
        line = inp.readline()
        if line == "":
            break
        run(line, options, out=sys.stdout, filename="<stdin>")
    sys.stdout.write("\n")
    return EX_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns a sysexits-style code. Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EX_USAGE
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return EX_USAGE

    if options.script is None:
        return run_prompt(options)
    return run_file(options)
