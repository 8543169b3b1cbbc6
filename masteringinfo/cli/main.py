"""masteringinfo CLI - Sound Check report for stereo masters."""
from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path

from masteringinfo.version import __version__
from masteringinfo.types import MasteringInfo
from masteringinfo.config import load_tool_config, apply_overrides
from masteringinfo.errors import ConfigError, RootUserError, ToolError
from masteringinfo.io.audio import probe_input
from masteringinfo.io.tools import (
    ConversionWorkspace,
    convert_to_caf,
    ensure_not_root,
    read_analysis,
)
from masteringinfo.parsing.afinfo import parse_report, verify_two_channels
from masteringinfo.metrics.derived import add_derived_metrics, require_fields
from masteringinfo.reporting.summary import render_summary
from masteringinfo.reporting.json_report import build_report_dict
from masteringinfo.utils.timefmt import format_duration


EXIT_OK = 0
EXIT_BAD_ARGS = 2
EXIT_INPUT_ERROR = 3
EXIT_TOOL_ERROR = 4
EXIT_INTERNAL_ERROR = 5
EXIT_CONFIG_ERROR = 6


def build_mastering_info(report_text: str) -> MasteringInfo:
    """Parse, validate and derive metrics from an afinfo report."""
    info = parse_report(report_text)
    verify_two_channels(info)
    require_fields(info)
    return add_derived_metrics(info)


def _render(info: MasteringInfo, label: str, as_json: bool) -> str:
    if as_json:
        return json.dumps(build_report_dict(info, label), indent=2) + "\n"
    return render_summary(info, label)


def _emit(output: str, out: str | None) -> None:
    if out:
        Path(out).write_text(output, encoding="utf-8")
        print(f"Report written to: {out}", file=sys.stderr)
    else:
        sys.stdout.write(output)


def _handle_error(exc: Exception) -> int:
    """Print a one-line diagnostic and map the exception to an exit code."""
    if isinstance(exc, RootUserError):
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_BAD_ARGS
    if isinstance(exc, ConfigError):
        print(f"Error: Invalid configuration - {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    if isinstance(exc, FileNotFoundError):
        print(f"Error: File not found - {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    if isinstance(exc, ValueError):
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    if isinstance(exc, ToolError):
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_TOOL_ERROR
    print(f"Internal error: {exc}", file=sys.stderr)
    return EXIT_INTERNAL_ERROR


def cmd_analyze(args) -> int:
    """Handle analyze command."""
    try:
        ensure_not_root()
        config = apply_overrides(
            load_tool_config(args.config),
            afconvert=args.afconvert,
            afinfo=args.afinfo
        )
        source = probe_input(args.audio_path)
        if args.verbose:
            print(
                f"Input: {source.format}/{source.subtype}, {source.channels} ch, "
                f"{source.fs:.0f} Hz, {format_duration(source.duration, compact=True)}",
                file=sys.stderr
            )

        with ConversionWorkspace(args.audio_path) as workspace:
            convert_to_caf(
                args.audio_path,
                workspace.caf_path,
                config,
                verbose=args.verbose
            )
            report_text = read_analysis(workspace.caf_path, config, verbose=args.verbose)

        info = build_mastering_info(report_text)
        _emit(_render(info, Path(args.audio_path).name, args.json), args.out)
        return EXIT_OK
    except Exception as e:
        return _handle_error(e)


def cmd_parse(args) -> int:
    """Handle parse command (saved afinfo output, no external tools)."""
    try:
        if args.report_path == "-":
            report_text = sys.stdin.read()
            default_label = "stdin"
        else:
            report_text = Path(args.report_path).read_text(encoding="utf-8")
            default_label = Path(args.report_path).name
        info = build_mastering_info(report_text)
        _emit(_render(info, args.label or default_label, args.json), args.out)
        return EXIT_OK
    except Exception as e:
        return _handle_error(e)


def _add_output_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON"
    )
    p.add_argument(
        "--out", "-o",
        help="Write the report to this path instead of stdout"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="masteringinfo",
        description="Sound Check and loudness report for stereo masters"
    )
    parser.add_argument(
        "--version", action="version",
        version=f"masteringinfo {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Convert a stereo WAV with afconvert and report afinfo's analysis"
    )
    analyze_parser.add_argument(
        "audio_path",
        help="Path to stereo audio file (WAV)"
    )
    analyze_parser.add_argument(
        "--config", "-c",
        help="Path to tool configuration JSON"
    )
    analyze_parser.add_argument(
        "--afconvert",
        help="afconvert executable (default: afconvert on PATH)"
    )
    analyze_parser.add_argument(
        "--afinfo",
        help="afinfo executable (default: afinfo on PATH)"
    )
    analyze_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Echo external commands and input format to stderr"
    )
    _add_output_args(analyze_parser)
    analyze_parser.set_defaults(func=cmd_analyze)

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Report on saved afinfo output ('-' reads stdin)"
    )
    parse_parser.add_argument(
        "report_path",
        help="Path to a text file holding afinfo output"
    )
    parse_parser.add_argument(
        "--label",
        help="Name shown in the report title (default: report file name)"
    )
    _add_output_args(parse_parser)
    parse_parser.set_defaults(func=cmd_parse)
    return parser


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()
        sys.exit(EXIT_BAD_ARGS)


if __name__ == "__main__":
    main()
