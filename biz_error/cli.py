"""
Command-line interface for the error-catalog compiler.

Usage:
  biz-error generate biz_errors.yaml -o app/error_codes.py
  biz-error check biz_errors.yaml
  biz-error list biz_errors.yaml --lang zh-CN
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import CompilerConfig, GenerationResult, load_config
from .codegen.core.config import ConfigError, get_config_manager
from .codegen.core.errors import CatalogBuildError, CatalogError
from .codegen.core.schema import load_catalog
from .codegen.core.validator import validate_catalog
from .codegen.languages.python import create_python_mapper
from .codegen.registry import RegistryError
from .frontends import build_from_source, default_output_name, generate_error_codes
from .logging_config import get_logger, setup_logging
from .utils import read_schema_text

logger = get_logger(__name__)

# Initialize rich console
console = Console()


def _add_input_args(parser: argparse.ArgumentParser):
    """Add the schema source arguments shared by every command."""
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("schema", nargs="?", help="YAML error schema")
    input_group.add_argument("--url", help="URL to fetch the schema from")


def _add_config_args(parser: argparse.ArgumentParser):
    """Add compiler configuration arguments."""
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument("--enum-name", metavar="NAME", help="Name of the generated enum")
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't annotate members with their default message",
    )
    parser.add_argument(
        "--require-default-message",
        action="store_true",
        help="Reject entries without a default-language message",
    )
    parser.add_argument(
        "--unique-codes",
        action="store_true",
        help="Reject entries that share a numeric code",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="biz-error",
        description="Compile a YAML error catalog into typed error codes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  biz-error generate biz_errors.yaml -o app/error_codes.py
  biz-error generate --url https://example.com/biz_errors.yaml
  biz-error check biz_errors.yaml --unique-codes
  biz-error list biz_errors.yaml --lang zh-CN
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate the error-code module")
    _add_input_args(generate)
    _add_config_args(generate)
    generate.add_argument(
        "--output",
        "-o",
        metavar="PATH",
        help="Output file or directory (default: stdout)",
    )
    generate.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )
    generate.set_defaults(func=_handle_generate)

    check = subparsers.add_parser("check", help="Validate the schema without writing")
    _add_input_args(check)
    _add_config_args(check)
    check.set_defaults(func=_handle_check)

    list_parser = subparsers.add_parser("list", help="List the declared error codes")
    _add_input_args(list_parser)
    list_parser.add_argument(
        "--lang", metavar="TAG", help="Show messages in this language"
    )
    list_parser.set_defaults(func=_handle_list)

    return parser


def _build_config(args: argparse.Namespace) -> CompilerConfig:
    """Build configuration from CLI arguments."""
    config_dict: Dict[str, Any] = {}

    if args.enum_name:
        config_dict["enum_name"] = args.enum_name

    if args.no_comments:
        config_dict["add_comments"] = False

    if args.require_default_message:
        config_dict["require_default_message"] = True

    if args.unique_codes:
        config_dict["unique_codes"] = True

    config = load_config(custom_config=config_dict, config_file=args.config)

    warnings = get_config_manager().validate_config(config)
    if warnings:
        raise ConfigError("; ".join(warnings))

    return config


def _print_warnings(warnings: List[str]):
    if warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}", soft_wrap=True)


def _print_metadata(result: GenerationResult):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        if isinstance(value, list):
            value = ", ".join(value)
        metadata_table.add_row(key.replace("_", " ").title(), escape(str(value)))

    console.print()
    console.print(metadata_table)


def _resolve_output(output: str, schema_source: str) -> Path:
    """Place the default file name inside output when it is a directory."""
    output_path = Path(output)
    if output_path.is_dir():
        output_path = output_path / default_output_name(Path(schema_source).name)
    return output_path


def _handle_generate(args: argparse.Namespace) -> int:
    config = _build_config(args)

    if args.output:
        output_path = _resolve_output(args.output, args.schema or args.url)
        result = generate_error_codes(args.schema, output_path, config, url=args.url)
        console.print(
            f"[green]✓[/green] Generated {result.metadata['entry_count']} error codes "
            f"to [cyan]{escape(str(output_path))}[/cyan]"
        )
    else:
        result = build_from_source(args.schema, url=args.url, config=config)
        if console.is_terminal:
            console.print(Syntax(result.code, "python", theme="monokai"))
        else:
            # Keep piped output byte-identical to the generated module
            sys.stdout.write(result.code)
            sys.stdout.flush()

    if args.verbose:
        _print_metadata(result)

    _print_warnings(result.warnings)
    return 0


def _handle_check(args: argparse.Namespace) -> int:
    config = _build_config(args)
    result = build_from_source(args.schema, url=args.url, config=config)

    languages = ", ".join(result.metadata["languages"]) or "none"
    console.print(
        Panel(
            f"[bold]Error codes:[/bold] {result.metadata['entry_count']}\n"
            f"[bold]Default language:[/bold] {result.metadata['default_language']}\n"
            f"[bold]Languages:[/bold] {languages}",
            title="✓ Schema is valid",
            border_style="green",
        )
    )
    _print_warnings(result.warnings)
    return 0


def _handle_list(args: argparse.Namespace) -> int:
    source = args.schema or args.url
    try:
        source, schema_text = read_schema_text(file_path=args.schema, url=args.url)
        catalog = load_catalog(schema_text)
        validate_catalog(catalog, mapper=create_python_mapper())
    except CatalogError as e:
        raise CatalogBuildError(source, e) from e

    language = args.lang or catalog.default_language

    table = Table(
        title=f"📋 Error codes ({language})", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Name", style="bold green", no_wrap=True)
    table.add_column("Code", style="cyan", justify="right")
    table.add_column("Status", style="blue", justify="right")
    table.add_column("Message")

    for entry in catalog.entries:
        message = entry.get_message(language)
        if message is None:
            message = entry.get_message(catalog.default_language) or ""
        table.add_row(
            escape(entry.raw_name),
            str(entry.numeric_code),
            str(entry.status_code),
            escape(message),
        )

    console.print(table)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    logger.debug("Running %s command", args.command)

    try:
        return args.func(args)
    except (CatalogError, ConfigError, RegistryError) as e:
        console.print(
            f"[red]✗ Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
