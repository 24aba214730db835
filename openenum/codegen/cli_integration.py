"""
CLI integration for code generation functionality.

Provides the ``generate`` subcommand of the openenum command line.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from ..logging_config import LOG_LEVELS, get_logger, setup_logging
from ..utils import SchemaLoaderError, load_schema_document, load_schema_from_stream
from .core.config import ConfigError, GeneratorConfig, VALID_CASES, load_config
from .core.generator import GenerationResult, generate_code
from .core.model import EnumDefinition, SchemaError, load_enum_definitions
from .registry import (
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    list_all_language_info,
    list_supported_languages,
)

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Tables and panels go to stdout; status messages go to stderr so that
# generated code written to stdout can be redirected to a file.
console = Console()
err_console = Console(stderr=True)


def create_generate_subparser(subparsers) -> argparse.ArgumentParser:
    """
    Create the ``generate`` subcommand parser.

    For use with: openenum generate [options]

    Args:
        subparsers: Subparser group from main parser

    Returns:
        Configured subparser for the generate command
    """
    parser = subparsers.add_parser(
        "generate",
        help="Generate enums from an enum schema",
        description="Generate forward-compatible string enums from an enum schema document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  openenum generate --language rust schema.json -o types.rs
  openenum generate -l python --stdin < schema.json > enums.py
  openenum generate --url https://example.com/enums.json
  openenum generate --list-languages
  openenum generate --language-info python
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Schema JSON file")
    input_group.add_argument("--url", help="URL to fetch the schema from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the schema from standard input"
    )

    # Core generation options
    parser.add_argument(
        "--language", "-l", default="rust", help="Target language (default: rust)"
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument("--module-name", help="Name of the generated module")
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't copy schema documentation into generated code",
    )
    parser.add_argument(
        "--variant-case",
        choices=sorted(VALID_CASES),
        help="Naming case for enum members",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show generation metadata"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )

    parser.set_defaults(func=handle_generate_command)
    return parser


def handle_generate_command(args: argparse.Namespace) -> int:
    """
    Handle the generate subcommand.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    setup_logging(args.log_level, args.log_file)

    try:
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        if not _validate_language(args.language):
            return 1

        if not (args.file or args.url or args.stdin):
            raise CLIError("Input source required (file, --url, or --stdin)")

        source, document = _load_input(args)
        enums = _load_enums(document, source)
        config = _build_config(args)
        return _generate_and_output(enums, args.language, config, args)

    except CLIError as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Policy", style="magenta")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(lang_name, info["file_extension"], info["class"], info["policy"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] openenum generate [dim]schema.json[/dim] --language [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] openenum generate --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        err_console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        err_console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Enum Policy:[/bold] {info['policy']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name'].title()} Generator", border_style="green")
    )

    generator = get_generator(language)
    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    for setting, value in _config_rows(generator.config):
        config_table.add_row(setting, value)

    console.print()
    console.print(config_table)

    examples_text = f"""Generate to stdout:
[cyan]openenum generate --language {info['name']} schema.json[/cyan]

Generate to file:
[cyan]openenum generate -l {info['name']} -o enums{info['file_extension']} schema.json[/cyan]"""

    console.print()
    console.print(Panel(examples_text, title="💡 Usage Examples", border_style="blue"))
    return 0


def _config_rows(config: GeneratorConfig) -> List[tuple]:
    rows = [
        ("Module Name", config.module_name),
        ("Indent Size", str(config.indent_size)),
        ("Type Case", config.type_case),
        ("Variant Case", config.variant_case),
        ("Add Comments", str(config.add_comments)),
    ]
    for key, value in sorted(config.custom.items()):
        if isinstance(value, (list, tuple)):
            value = ", ".join(str(v) for v in value)
        rows.append((key.replace("_", " ").title(), str(value)))
    return rows


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language (or alias) is supported."""
    if get_registry().is_supported(language):
        return True
    if not silent:
        supported = list_supported_languages()
        err_console.print(f"[red]✗ Unsupported language '{language}'[/red]")
        err_console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
    return False


def _load_input(args: argparse.Namespace) -> tuple:
    """Load the schema document from the selected input source."""
    try:
        if args.stdin:
            return load_schema_from_stream(sys.stdin)
        return load_schema_document(file_path=args.file, url=args.url)
    except (SchemaLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _load_enums(document: Dict[str, Any], source: str) -> List[EnumDefinition]:
    try:
        enums = load_enum_definitions(document)
    except SchemaError as e:
        raise CLIError(f"Invalid schema in {source}: {e}") from e
    logger.info("Loaded %d enums from %s", len(enums), source)
    return enums


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides: Dict[str, Any] = {}

    if args.module_name:
        overrides["module_name"] = args.module_name

    if args.no_comments:
        overrides["add_comments"] = False

    if args.variant_case:
        overrides["variant_case"] = args.variant_case

    if args.output:
        overrides["output_file"] = args.output

    language = get_registry().resolve(args.language)
    try:
        return load_config(language, custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate(enums: List[EnumDefinition], language: str, config: GeneratorConfig) -> GenerationResult:
    try:
        generator = get_generator(language, config)
    except RegistryError as e:
        raise CLIError(str(e)) from e

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    ) as progress:
        progress.add_task(f"[green]Generating {generator.language_name} code...", total=None)
        return generate_code(generator, enums)


def _generate_and_output(
    enums: List[EnumDefinition],
    language: str,
    config: GeneratorConfig,
    args: argparse.Namespace,
) -> int:
    """Generate code and handle output with rich formatting."""
    result = _generate(enums, language, config)

    if not result.success:
        err_console.print(f"[red]✗ {escape(result.error_message)}[/red]")
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        err_console.print(
            f"[green]✓[/green] Generated {result.metadata['language']} code saved to "
            f"[cyan]{output_path}[/cyan]"
        )
    elif console.is_terminal:
        console.print(Syntax(result.code, result.metadata["language"], theme="monokai"))
    else:
        sys.stdout.write(result.code)

    if args.verbose and result.metadata:
        _print_metadata(result.metadata)

    if result.warnings:
        err_console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            err_console.print(f"  [yellow]•[/yellow] {escape(warning)}")

    return 0


def _print_metadata(metadata: Dict[str, Any]):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    err_console.print()
    err_console.print(metadata_table)
