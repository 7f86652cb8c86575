"""CLI interface for create-qapp - scaffold a new Qortal App from a template."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional

import click
from rich.logging import RichHandler

from . import __version__
from .config import ScaffoldConfig, get_config
from .errors import (
    ConflictError,
    CreateQappError,
    DiscoveryError,
    EditorWarning,
    InputError,
)
from .github import clone_template, fetch_templates
from .project import (
    editor_available,
    install_dependencies,
    launch_editor,
    sanitize_package_name,
    update_manifest_name,
)
from .utils import console, err_console

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    root.addHandler(RichHandler(console=err_console, show_time=False, show_path=False))
    root.setLevel(logging.WARNING)


def _validate_project_name(value: str) -> str:
    if not value.strip():
        raise click.BadParameter("Project name cannot be empty.")
    return value


def prompt_project_name() -> str:
    return click.prompt("Enter the name of your app", value_proc=_validate_project_name)


def prompt_template(templates: List[str]) -> str:
    """Show a numbered menu of ``templates`` and return the chosen one."""
    for index, name in enumerate(templates, start=1):
        console.print(f"  {index}) {name}")
    choice = click.prompt(
        "Select a template",
        type=click.IntRange(1, len(templates)),
        default=1,
    )
    return templates[choice - 1]


def open_in_editor(project_path: Path, config: ScaffoldConfig) -> bool:
    """Try to open the project in the configured editor. Never raises."""
    try:
        if not editor_available(config.editor):
            raise EditorWarning(f"'{config.editor}' is not available")
        console.print(f"\n💻 Opening project in {config.editor_name}...")
        launch_editor(config.editor, project_path)
    except EditorWarning as e:
        logger.debug(str(e))
        console.print(
            f"\n⚠️ {config.editor_name} not found or not installed. Open the project manually.",
            style="yellow",
        )
        return False
    return True


def create_project(
    raw_name: str,
    config: ScaffoldConfig,
    choose_template: Optional[Callable[[List[str]], str]] = None,
    cwd: Optional[Path] = None,
) -> Path:
    """Scaffold a project named after ``raw_name`` below ``cwd``.

    Steps run strictly in order: sanitize the name, list templates, let the
    user choose one, download it, patch the manifest, install dependencies
    and finally try the editor. Every fatal problem surfaces as a
    :class:`CreateQappError`; the editor step only ever prints an advisory.
    """
    name = sanitize_package_name(raw_name)
    if not name:
        raise InputError("Invalid project name. Use letters, numbers, and dashes only.")

    console.print("\n🔍 Fetching available templates...\n")
    templates = fetch_templates(config)
    if not templates:
        raise DiscoveryError("No templates found. Check your GitHub repository structure.")

    template = (choose_template or prompt_template)(templates)
    console.print(f'\n🚀 Creating project "{name}" using template "{template}"...\n')

    project_path = (cwd or Path.cwd()).resolve() / name
    if project_path.exists():
        raise ConflictError(f'Directory "{name}" already exists.')

    clone_template(template, project_path, config)
    console.print("✅ Template cloned successfully!", style="green")

    if update_manifest_name(project_path, name, config.manifest):
        console.print(f"📦 Updated {config.manifest} with project name.")

    # Working directory stays inside the new project once the run is over.
    os.chdir(project_path)
    console.print("\n📦 Installing dependencies...")
    install_dependencies(project_path, config.install_command)

    console.print(f'\n🎉 Project "{name}" is ready!', style="bold green")
    console.print(f"\nNext steps:\n  cd {name}\n  {config.run_command}")

    open_in_editor(project_path, config)
    return project_path


@click.command(help="Create a new Qortal App")
@click.version_option(__version__, prog_name="create-qapp")
def cli() -> None:
    _configure_logging()
    config = get_config()
    raw_name = prompt_project_name()
    try:
        create_project(raw_name, config)
    except CreateQappError as e:
        err_console.print(f"❌ Error: {e}", style="bold red")
        raise SystemExit(1)


if __name__ == "__main__":  # pragma: no cover
    cli()
