"""Configuration management commands."""

from typing import Optional

import click


@click.group()
def config() -> None:
    """Configuration commands."""
    pass


@config.command("show")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Configuration file")
def config_show(config_path: Optional[str]) -> None:
    """Show the merged configuration."""
    from reconeval.cli.progress import console
    from reconeval.core.config import load_config_cascade

    config_obj = load_config_cascade(config_path)

    console.print("\n[bold]Current Configuration[/bold]")
    if config_obj._source:
        console.print(f"[dim]Source: {config_obj._source}[/dim]\n")
    else:
        console.print("[dim]Source: defaults (no config file found)[/dim]\n")

    for section_name, section in config_obj.to_dict().items():
        if section:
            console.print(f"[bold blue]\\[{section_name}][/bold blue]")
            for key, value in section.items():
                console.print(f"  {key} = {value}")
            console.print()


@config.command("init")
@click.option("--output", "-o", default="reconeval.toml", help="Output file path")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing file")
def config_init(output: str, force: bool) -> None:
    """Create a default configuration file."""
    from pathlib import Path

    from reconeval.cli.progress import print_error, print_success
    from reconeval.core.config import create_default_config_file

    if Path(output).exists() and not force:
        print_error(f"File already exists: {output}")
        click.echo("Use --force to overwrite.")
        raise SystemExit(1)

    create_default_config_file(output)
    print_success(f"Created configuration file: {output}")


@config.command("path")
def config_path() -> None:
    """Show configuration file search paths."""
    from reconeval.cli.progress import console
    from reconeval.core.config import find_config_file, get_config_locations

    active = find_config_file()

    console.print("\n[bold]Configuration File Search Paths[/bold]\n")
    console.print("Files are merged from the bottom up (first listed wins):\n")

    for location in get_config_locations():
        if active is not None and location == active:
            console.print(f"  [green]✓ {location}[/green] (active)")
        elif location.exists():
            console.print(f"  [blue]• {location}[/blue]")
        else:
            console.print(f"  [dim]• {location}[/dim]")

    console.print()
