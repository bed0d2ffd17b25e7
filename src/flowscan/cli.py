"""Command-line interface for flowscan."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from flowscan.errors import ConfigError
from flowscan.render import DEFAULT_INDENT

FORMATS = ("trace", "tokens")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    indent: int
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="flowscan",
        description="Scan Go-like source and print its brace-indented token trace",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: trace)",
    )
    p.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help="Spaces per brace depth in trace output (default: 2)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover flowscan.toml)",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Log hook dispatch and dump tokens to stderr",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "flowscan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(str(exc), str(path)) from exc


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    fmt = "trace"
    indent = DEFAULT_INDENT
    cfg_render = config.get("render")
    if cfg_render is not None and not isinstance(cfg_render, dict):
        raise ConfigError("[render] must be a table")
    if isinstance(cfg_render, dict):
        cfg_format = cfg_render.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise ConfigError(f"render.format must be one of {', '.join(FORMATS)}")
            fmt = cfg_format
        cfg_indent = cfg_render.get("indent")
        if cfg_indent is not None:
            # bool is an int subclass; reject it explicitly
            if not isinstance(cfg_indent, int) or isinstance(cfg_indent, bool):
                raise ConfigError("render.indent must be an integer")
            indent = cfg_indent

    if args.format is not None:
        fmt = args.format
    if args.indent is not None:
        indent = args.indent
    if indent < 0:
        raise ConfigError(f"indent must not be negative, got {indent}")

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        indent=indent,
        debug=args.debug,
    )


def scan_file(options: CliOptions) -> str:
    """Read and scan a source file, returning the formatted output."""
    from flowscan.render import dump_tokens, format_token_dump, format_tokens
    from flowscan.scanner import from_file

    tokens = from_file(options.input_file).tokens

    if options.debug:
        dump_tokens(tokens)

    if options.format == "tokens":
        return format_token_dump(tokens)
    return format_tokens(tokens, options.indent)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        text = scan_file(options)
        if options.output_file:
            options.output_file.write_text(text, encoding="utf-8")
        else:
            sys.stdout.write(text)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0
