"""
CLI integration for code generation functionality.

Provides command-line interface for the codegen module.
"""

import argparse
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import generate_from_model, get_generator, list_supported_languages, load_config
from .core.config import GeneratorConfig
from .core.errors import GeneratorError
from .registry import (
    get_language_info,
    is_language_supported,
    list_all_language_info,
    resolve_language,
)
from ..logging_config import get_logger
from ..utils import ModelSourceError, load_model_from_stream, load_model_source

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich consoles; diagnostics go to stderr so piped output stays clean
console = Console()
err_console = Console(stderr=True)


def add_codegen_args(parser: argparse.ArgumentParser):
    """Add code generation arguments to a CLI parser."""

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Smithy JSON AST file")
    input_group.add_argument("--url", help="URL to fetch the JSON AST from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the JSON AST from standard input"
    )

    # Core generation options
    parser.add_argument(
        "--language",
        "-l",
        default="typescript",
        help="Target language for code generation (default: typescript)",
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add documentation comments to generated code",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )

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


def handle_codegen_command(args: argparse.Namespace) -> int:
    """
    Handle code generation command from CLI arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        # Handle informational commands first
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        if not (args.file or args.url or args.stdin):
            err_console.print("[red]✗[/red] Input source required (file, --url, or --stdin)")
            return 1

        if not _validate_language(args.language):
            return 1

        model_data = _get_input_data(args)
        config = _build_config(args)

        return _generate_and_output(model_data, args.language, config, args)

    except CLIError as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except GeneratorError as e:
        logger.debug("Generation aborted", exc_info=True)
        err_console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Usage:[/bold] shapegen [dim]model.json[/dim] --language [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] shapegen --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(
            info_text,
            title=f"🔧 {info['name'].title()} Generator",
            border_style="green",
        )
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

    config_table.add_row("Indent Size", str(generator.config.indent_size))
    config_table.add_row("Use Tabs", str(generator.config.use_tabs))
    config_table.add_row("Add Comments", str(generator.config.add_comments))
    for key, value in sorted(generator.config.custom.items()):
        config_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(config_table)

    examples_text = f"""Generate to stdout:
[cyan]shapegen --language {language} model.json[/cyan]

Generate to file:
[cyan]shapegen -l {language} -o models{info['file_extension']} model.json[/cyan]

Read the model from a pipe:
[cyan]smithy ast | shapegen -l {language} --stdin[/cyan]"""

    console.print()
    console.print(Panel(examples_text, title="💡 Usage Examples", border_style="blue"))

    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language is supported."""
    if not is_language_supported(language):
        if not silent:
            supported = list_supported_languages()
            err_console.print(f"[red]✗ Unsupported language '{language}'[/red]")
            err_console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _get_input_data(args: argparse.Namespace):
    """Get JSON AST input data from the selected source."""
    try:
        if args.file:
            return load_model_source(file_path=args.file)[1]
        elif args.url:
            return load_model_source(url=args.url)[1]
        elif args.stdin:
            return load_model_from_stream(sys.stdin)[1]
        else:
            raise CLIError("No input source specified")
    except (ModelSourceError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from CLI arguments."""
    config_dict = {}

    if args.no_comments:
        config_dict["add_comments"] = False

    return load_config(resolve_language(args.language), custom_config=config_dict, config_file=args.config)


def _generate_and_output(
    model_data, language: str, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    with err_console.status(f"[green]Generating {language} code..."):
        result = generate_from_model(model_data, language, config)

    if not result.success:
        err_console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    output_file = args.output
    if output_file:
        output_path = Path(output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        err_console.print(
            f"[green]✓[/green] Generated {language} code saved to [cyan]{output_path}[/cyan]"
        )
    elif console.is_terminal:
        console.print(Syntax(result.code, result.metadata.get("language", language), theme="monokai"))
    else:
        # Plain text when piped so the output stays valid source
        sys.stdout.write(result.code)

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        err_console.print()
        err_console.print(metadata_table)

    if result.warnings:
        err_console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            err_console.print(f"  [yellow]•[/yellow] {warning}")
        err_console.print()

    return 0

