"""osdetect CLI - Operating system and CPU architecture detector."""
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Union

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from osdetect_core.config import DetectorConfig, get_config, get_config_manager
from osdetect_core.detector import FAIL_ON_UNKNOWN_OS, Detector
from osdetect_core.exceptions import OSDetectError, ValidationError
from osdetect_core.schemas import DETECTED_CLASSIFIER
from osdetect_core.utils import parse_definition, write_properties_file
from platform_providers import get_property_provider

logger = logging.getLogger("osdetect")

# Rich consoles for pretty output; logs go to stderr
console = Console()
err_console = Console(stderr=True)

# CLI app
app = typer.Typer(
    name="osdetect",
    help="osdetect - Operating system and CPU architecture detector",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")


def setup_logging(verbose: bool = False) -> None:
    """Route log records through rich."""
    level = logging.DEBUG if verbose else get_config().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def handle_error(e: Exception) -> None:
    """Handle and display errors nicely."""
    if isinstance(e, OSDetectError):
        err_console.print(f"[red]Error:[/red] {e}")
    else:
        err_console.print(f"[red]Unexpected error:[/red] {e}")
        logger.exception("Unexpected error")
    raise typer.Exit(1)


def _run_detection(
    likes: Optional[List[str]],
    fail_on_unknown: Optional[bool],
    mirror: Optional[bool],
    append_release: Optional[bool],
    defines: Optional[List[str]],
) -> Dict[str, str]:
    config = get_config()
    provider = get_property_provider()

    for definition in defines or []:
        key, value = parse_definition(definition)
        provider.set(key, value)

    if fail_on_unknown is not None:
        provider.set(FAIL_ON_UNKNOWN_OS, "true" if fail_on_unknown else "false")
    elif not config.fail_on_unknown_os:
        provider.set(FAIL_ON_UNKNOWN_OS, "false")

    detector = Detector(
        provider,
        mirror_system_properties=config.mirror_system_properties if mirror is None else mirror,
        append_release_to_classifier=(
            config.append_release_to_classifier if append_release is None else append_release
        ),
    )
    properties: Dict[str, str] = {}
    detector.detect(properties, likes if likes else config.classifier_with_likes)
    return properties


# ============================================================================
# Detection Commands
# ============================================================================

@app.command("detect")
def detect_cmd(
    likes: Optional[List[str]] = typer.Option(None, "--like", "-l", help="Extra classifier qualifier (repeatable)"),
    fail_on_unknown: Optional[bool] = typer.Option(
        None, "--fail-on-unknown/--no-fail-on-unknown", help="Fail when os.name is not recognized"
    ),
    mirror: Optional[bool] = typer.Option(
        None, "--mirror/--no-mirror", help="Write name, arch and bitness into the live property store"
    ),
    append_release: Optional[bool] = typer.Option(
        None, "--append-release/--no-append-release", help="Append the Linux release id to the classifier"
    ),
    defines: Optional[List[str]] = typer.Option(None, "--define", "-D", help="Set a property, e.g. -D os.name=Linux"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write a .properties file"),
    as_json: bool = typer.Option(False, "--json", help="Print properties as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every detected property"),
):
    """Detect the operating system and CPU architecture."""
    try:
        setup_logging(verbose)
        properties = _run_detection(likes, fail_on_unknown, mirror, append_release, defines)
        if output:
            write_properties_file(output, properties)
            err_console.print(f"[green]✓[/green] Properties written to {output}")
    except Exception as e:
        handle_error(e)
        return

    if as_json:
        typer.echo(json.dumps(properties, indent=2))
        return

    table = Table(title="Detected Platform")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    for key, value in properties.items():
        table.add_row(key, value)
    console.print(table)


@app.command("classifier")
def classifier_cmd(
    likes: Optional[List[str]] = typer.Option(None, "--like", "-l", help="Extra classifier qualifier (repeatable)"),
    defines: Optional[List[str]] = typer.Option(None, "--define", "-D", help="Set a property, e.g. -D os.name=Linux"),
):
    """Print only the classifier, e.g. linux-x86_64."""
    try:
        setup_logging()
        properties = _run_detection(likes, None, None, None, defines)
    except Exception as e:
        handle_error(e)
        return
    typer.echo(properties[DETECTED_CLASSIFIER])


# ============================================================================
# Config Commands
# ============================================================================

@config_app.command("show")
def show_config_cmd():
    """Show current configuration."""
    try:
        config = get_config_manager().get()
    except Exception as e:
        handle_error(e)
        return
    console.print("\n[bold]osdetect Configuration:[/bold]")
    for key, value in config.model_dump().items():
        console.print(f"  {key}: {value}")


@config_app.command("path")
def config_path_cmd():
    """Show configuration file path."""
    manager = get_config_manager()
    console.print(f"Config file: {manager.config_path}")


@config_app.command("set")
def config_set_cmd(
    key: str = typer.Argument(..., help="Setting name, e.g. fail_on_unknown_os"),
    value: str = typer.Argument(..., help="New value; lists are comma separated"),
):
    """Change one setting and save the config file."""
    try:
        if key not in DetectorConfig.model_fields:
            raise ValidationError(key, f"Unknown setting, expected one of {', '.join(DetectorConfig.model_fields)}")
        new_value: Union[str, List[str]] = value
        if key == "classifier_with_likes":
            new_value = [part.strip() for part in value.split(",") if part.strip()]
        manager = get_config_manager()
        manager.update(**{key: new_value})
        manager.save()
    except Exception as e:
        handle_error(e)
        return
    console.print(f"[green]✓[/green] {key} = {getattr(manager.get(), key)}")


@config_app.command("reset")
def config_reset_cmd():
    """Restore the default settings and save the config file."""
    try:
        manager = get_config_manager()
        manager.reset()
        manager.save()
    except Exception as e:
        handle_error(e)
        return
    console.print(f"[green]✓[/green] Configuration reset: {manager.config_path}")


# ============================================================================
# Root Commands
# ============================================================================

@app.command("version")
def version_cmd():
    """Show osdetect version."""
    from osdetect_core import __version__
    console.print(f"osdetect (OS and architecture detector) v{__version__}")


def main():
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted[/dim]")
        sys.exit(0)


if __name__ == "__main__":
    main()
