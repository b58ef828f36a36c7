"""
envcheck CLI - required environment variable checker

Main entry point for the envcheck command-line tool.
"""

import os
import sys

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.checker import Checker, load_environment
from .core.envfile import EnvFile, DEFAULT_ENV_FILE_NAME
from .core.errors import EnvCheckError, NoVariablesProvided, UnknownCommand
from .core.manifest import ManifestStore, DEFAULT_MANIFEST_NAME, ENV_CHECK_FIELD
from .core.prompter import ClickPrompter


console = Console()
err_console = Console(stderr=True)

COMMAND_FLAGS = ("--add", "--sync")
CONFIG_OPTIONS = ("--project-root", "--manifest", "--env-file")


def _fail(message: str, hint: str | None = None):
    """Report an error on stderr and exit with status 1."""
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    if hint:
        err_console.print(f"[dim]{escape(hint)}[/dim]")
    sys.exit(1)


def _track(store: ManifestStore, names):
    """Merge names into envCheck and confirm the names supplied."""
    added = store.add_variables(names)
    console.print(
        f"[green]✓ Added variables: {escape(', '.join(names))} "
        f"to the {ENV_CHECK_FIELD} field in {escape(store.path.name)}[/green]"
    )
    return added


def add_variables(store: ManifestStore, names: tuple):
    """Track names in the manifest."""
    if not names:
        raise NoVariablesProvided()

    _track(store, names)


def sync_variables(store: ManifestStore, env_file: EnvFile):
    """Track every name assigned in the env file."""
    names = env_file.read_names()
    added = _track(store, names)

    console.print(
        f"[green]✓ Synced variables from {escape(env_file.path.name)} "
        f"to {escape(store.path.name)}[/green]"
    )
    if added:
        console.print(f"[dim]New: {escape(', '.join(added))}[/dim]")
    else:
        console.print("[dim]No new variables.[/dim]")


def check_variables(store: ManifestStore, env_file: EnvFile):
    """Verify tracked variables, prompting for and saving missing ones."""
    snapshot = load_environment(env_file, os.environ)
    checker = Checker(store, env_file, ClickPrompter(console), snapshot)

    result = checker.run()

    if result.ok:
        console.print("[green]✓ All environment variables are set.[/green]")
    else:
        console.print(f"[green]✓ {escape(env_file.path.name)} file updated successfully.[/green]")


def _command_token(args):
    """First argument that is not a config option or its value."""
    remaining = iter(args)
    for arg in remaining:
        if arg in CONFIG_OPTIONS:
            next(remaining, None)
            continue
        if arg.partition("=")[0] in CONFIG_OPTIONS:
            continue
        return arg
    return None


class EnvCheckCommand(click.Command):
    """Remembers which command token came first on the command line."""

    def parse_args(self, ctx, args):
        ctx.meta["envcheck.command"] = _command_token(args)
        return super().parse_args(ctx, args)


def _run_check(store: ManifestStore, env: EnvFile):
    try:
        check_variables(store, env)
    except (EnvCheckError, click.Abort):
        raise
    except Exception as e:
        err_console.print(f"[red]An error occurred: {escape(repr(e))}[/red]")
        sys.exit(1)


@click.command(cls=EnvCheckCommand, context_settings={"ignore_unknown_options": True})
@click.option('--add', 'add', is_flag=True, help='Add variable names to the manifest')
@click.option('--sync', 'sync', is_flag=True, help='Add every name from the env file to the manifest')
@click.option('--project-root', default=".", envvar="ENVCHECK_PROJECT_ROOT",
              show_default=True, help='Project root directory')
@click.option('--manifest', default=DEFAULT_MANIFEST_NAME, envvar="ENVCHECK_MANIFEST",
              show_default=True, help='Manifest file, relative to the project root')
@click.option('--env-file', default=DEFAULT_ENV_FILE_NAME, envvar="ENVCHECK_ENV_FILE",
              show_default=True, help='Environment file, relative to the project root')
@click.argument('names', nargs=-1, type=click.UNPROCESSED)
@click.version_option(__version__, prog_name="envcheck")
@click.pass_context
def cli(ctx, add, sync, project_root, manifest, env_file, names):
    """
    envcheck - make sure a project's required environment variables are set

    \b
    envcheck                 prompt for tracked variables that are not set
    envcheck --add NAME...   track NAME in the manifest's envCheck list
    envcheck --sync          track every name assigned in the env file
    """
    store = ManifestStore(project_root, manifest)
    env = EnvFile(project_root, env_file)

    command = ctx.meta.get("envcheck.command")

    try:
        if command is not None and command not in COMMAND_FLAGS:
            raise UnknownCommand(command)

        if add and sync:
            raise click.UsageError("--add and --sync cannot be used together")

        if add:
            add_variables(store, names)
        elif sync:
            sync_variables(store, env)
        else:
            _run_check(store, env)
    except click.UsageError as e:
        _fail(e.format_message())
    except EnvCheckError as e:
        _fail(str(e), e.hint)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
