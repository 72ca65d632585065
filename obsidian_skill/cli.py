"""Interactive installer for the Obsidian plugin development skill."""

from enum import Enum
from pathlib import Path

import click
from click.exceptions import Exit
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from obsidian_skill import __version__
from obsidian_skill.bundle import SkillBundle
from obsidian_skill.config import InstallerConfig
from obsidian_skill.exceptions import InstallError, InvalidChoiceError
from obsidian_skill.installer import InstallResult, SkillInstaller
from obsidian_skill.logger import get_logger
from obsidian_skill.paths import resolve_target

console = Console()
logger = get_logger(__name__)


class InstallChoice(Enum):
    CURRENT_DIRECTORY = "1"
    SPECIFIC_DIRECTORY = "2"
    CANCEL = "3"

    @classmethod
    def parse(cls, raw: str) -> "InstallChoice":
        try:
            return cls(raw.strip())
        except ValueError:
            raise InvalidChoiceError(raw) from None


MENU_LABELS = {
    InstallChoice.CURRENT_DIRECTORY: "Install to current directory",
    InstallChoice.SPECIFIC_DIRECTORY: "Install to specific directory",
    InstallChoice.CANCEL: "Cancel",
}


def _print_banner() -> None:
    console.print(
        Panel.fit(
            "[bold]Obsidian Plugin Development Skill Installer[/bold]",
            border_style="blue",
        )
    )
    console.print()


def _print_menu() -> None:
    console.print("[yellow]Choose installation option:[/yellow]\n")
    for choice, label in MENU_LABELS.items():
        console.print(f"  [blue]{choice.value})[/blue] {label}")
    console.print()


def _print_error(error: Exception) -> None:
    console.print(f"[red]Error: {escape(str(error))}[/red]", soft_wrap=True)


def _print_step(message: str, location: Path) -> None:
    console.print(f"[green]✓ {message}[/green]")
    console.print(f"  Location: {escape(str(location))}", soft_wrap=True)


def _print_summary(result: InstallResult, bundle: SkillBundle) -> None:
    metadata = bundle.metadata()
    claude_dir = result.skill_target.parent.parent.name

    structure = Table(show_header=False, box=None, padding=(0, 2))
    structure.add_column("Path", style="cyan")
    structure.add_column("Description", style="dim")
    structure.add_row(
        f"{claude_dir}/skills/{bundle.skill_name}/SKILL.md", "(Main overview)"
    )
    structure.add_row(
        f"{claude_dir}/skills/{bundle.skill_name}/reference/", "(Detailed docs)"
    )
    if result.command_target is not None:
        structure.add_row(
            f"{claude_dir}/commands/{result.command_target.name}", "(Slash command)"
        )

    console.print()
    console.print(
        Panel.fit(
            "[green]Installation Complete! ✓[/green]", border_style="green"
        )
    )
    console.print()
    name = escape(metadata.name)
    console.print(f"[blue]The {name} skill is now available in:[/blue]")
    console.print(f"  {escape(str(result.target_dir))}", soft_wrap=True)
    if metadata.description:
        console.print(f"  [dim]{escape(metadata.description)}[/dim]")
    console.print()
    console.print("[blue]Skill structure:[/blue]")
    console.print(structure)
    console.print()
    console.print("[yellow]Usage:[/yellow]")
    console.print(
        f"  - Just ask Claude for help with anything the {name} skill covers"
    )
    if result.command_target is not None:
        console.print(
            f"  - Or use: [blue]/{result.command_target.stem}[/blue] "
            "to explicitly load the skill"
        )
    console.print()


def install_skill(bundle: SkillBundle, config: InstallerConfig, target: Path) -> None:
    """Run one install and report it, turning failures into exit code 1."""
    console.print(
        f"[blue]Installing to: {escape(str(target))}[/blue]\n", soft_wrap=True
    )
    console.print("[yellow]Copying skill files...[/yellow]")

    installer = SkillInstaller(bundle, config)
    try:
        result = installer.install(target, on_step=_print_step)
    except InstallError as e:
        logger.debug(f"Install into {target} failed: {e!r}")
        _print_error(e)
        raise Exit(1) from e

    _print_summary(result, bundle)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--target",
    "-t",
    default=None,
    help="Install into this directory without showing the menu",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a YAML configuration file",
)
def main(target: str | None, config: Path | None) -> None:
    """Copy the Obsidian plugin skill into a project's .claude directory."""
    _print_banner()

    try:
        installer_config = InstallerConfig(config_file=config)
        bundle = SkillBundle.locate(installer_config)
    except InstallError as e:
        _print_error(e)
        raise Exit(1) from e

    if target is not None:
        install_skill(bundle, installer_config, resolve_target(target))
        return

    _print_menu()
    raw_choice = click.prompt("Enter choice [1-3]", default="", show_default=False)
    console.print()

    try:
        choice = InstallChoice.parse(raw_choice)
    except InvalidChoiceError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise Exit(1) from e

    if choice is InstallChoice.CURRENT_DIRECTORY:
        install_skill(bundle, installer_config, Path.cwd())
    elif choice is InstallChoice.SPECIFIC_DIRECTORY:
        raw_path = click.prompt(
            "Enter target directory path", default="", show_default=False
        )
        console.print()
        install_skill(bundle, installer_config, resolve_target(raw_path))
    else:
        console.print("[yellow]Installation cancelled[/yellow]")


if __name__ == "__main__":
    main()
