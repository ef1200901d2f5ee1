"""CLI commands using Typer."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

if TYPE_CHECKING:
    from hostfs.context import AppContext

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from hostfs import __version__
from hostfs.config import parse_mode
from hostfs.context import create_context
from hostfs.errors import FsError
from hostfs.types import WalkAction, WalkEntry

app = typer.Typer(
    name="hostfs",
    help="Everyday filesystem operations with sane defaults",
    no_args_is_help=True,
)

console = Console()

# Global options, filled in by the main callback
_state: dict[str, Any] = {"config_path": None}


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"hostfs v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every operation")] = False,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="YAML file with defaults")
    ] = None,
) -> None:
    """Everyday filesystem operations with sane defaults."""
    _configure_logging(verbose)
    _state["config_path"] = config


# ============================================================================
# Helpers
# ============================================================================


def _get_context(context: AppContext | None) -> AppContext:
    """Return the injected context or build one from the global options."""
    if context is not None:
        return context
    try:
        return create_context(_state["config_path"])
    except ValueError as e:
        console.print(f"[red]✗[/red] Invalid config: {escape(str(e))}")
        raise typer.Exit(1) from e


@contextmanager
def _fs_errors(ctx: AppContext) -> Iterator[None]:
    """Turn filesystem errors into an error message and exit code 1."""
    try:
        yield
    except FsError as e:
        ctx.output.show_error(str(e))
        raise typer.Exit(1) from e


def _parse_mode_option(ctx: AppContext, mode: str) -> int:
    """Parse an octal mode given on the command line."""
    try:
        return parse_mode(mode)
    except ValueError as e:
        ctx.output.show_error(f"Invalid mode '{mode}': expected octal such as 0755")
        raise typer.Exit(1) from e


def _walk_depth(root: str, path: str) -> int:
    rel = os.path.relpath(path, root)
    return 0 if rel == os.curdir else rel.count(os.sep) + 1


# ============================================================================
# Inspection Commands
# ============================================================================


@app.command("exists")
def exists_command(
    path: Annotated[str, typer.Argument(help="Path to check")],
    _context=None,
) -> None:
    """Print whether a path exists. Exits 1 when it does not."""
    ctx = _get_context(_context)
    found = ctx.filesystem.exists(path)
    ctx.output.show_value("true" if found else "false")
    if not found:
        raise typer.Exit(1)


@app.command("stat")
def stat_command(
    path: Annotated[str, typer.Argument(help="Path to inspect")],
    no_follow: Annotated[
        bool, typer.Option("--no-follow", help="Describe a symlink itself")
    ] = False,
    _context=None,
) -> None:
    """Show metadata of a path."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        info = ctx.filesystem.lstat(path) if no_follow else ctx.filesystem.stat(path)
    ctx.output.show_info_table(info)


# ============================================================================
# Creation Commands
# ============================================================================


@app.command("mkdir")
def mkdir_command(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create missing parents too")
    ] = False,
    mode: Annotated[str | None, typer.Option("--mode", "-m", help="Octal mode")] = None,
    _context=None,
) -> None:
    """Create a directory."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        if mode is None:
            if parents:
                ctx.filesystem.mkdir_all_default(path)
            else:
                ctx.filesystem.mkdir_default(path)
        else:
            dir_mode = _parse_mode_option(ctx, mode)
            if parents:
                ctx.filesystem.mkdir_all(path, dir_mode)
            else:
                ctx.filesystem.mkdir(path, dir_mode)
    ctx.output.show_success(f"Created directory {path}")


@app.command("ensure")
def ensure_command(
    path: Annotated[str, typer.Argument(help="Path that must exist")],
    file: Annotated[bool, typer.Option("--file", "-f", help="Ensure a file, not a directory")] = False,
    mode: Annotated[str | None, typer.Option("--mode", "-m", help="Octal mode")] = None,
    _context=None,
) -> None:
    """Make sure a directory (or file) exists, creating it if needed."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        if mode is None:
            if file:
                ctx.filesystem.ensure_file_default(path)
            else:
                ctx.filesystem.ensure_dir_default(path)
        else:
            parsed = _parse_mode_option(ctx, mode)
            if file:
                ctx.filesystem.ensure_file(path, parsed)
            else:
                ctx.filesystem.ensure_dir(path, parsed)
    ctx.output.show_success(f"{path} is ready")


@app.command("mktemp")
def mktemp_command(
    directory: Annotated[
        str, typer.Option("--dir", "-d", help="Directory (system temp if empty)")
    ] = "",
    pattern: Annotated[
        str, typer.Option("--pattern", "-p", help="Name pattern, '*' marks the random part")
    ] = "",
    _context=None,
) -> None:
    """Create a uniquely named empty file and print its path."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        handle, name = ctx.filesystem.create_temp(directory, pattern)
        handle.close()
    ctx.output.show_value(name)


# ============================================================================
# Copy, Read & Write Commands
# ============================================================================


@app.command("cp")
def cp_command(
    src: Annotated[str, typer.Argument(help="Source file or directory")],
    dst: Annotated[str, typer.Argument(help="Destination")],
    overwrite: Annotated[
        bool, typer.Option("--overwrite", "-o", help="Replace existing files")
    ] = False,
    _context=None,
) -> None:
    """Copy a file or directory tree."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        ctx.filesystem.copy(src, dst, overwrite)
    ctx.output.show_success(f"Copied {src} to {dst}")


@app.command("cat")
def cat_command(
    path: Annotated[str, typer.Argument(help="File to print")],
    _context=None,
) -> None:
    """Print a text file."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        text = ctx.filesystem.read_text_file(path)
    ctx.output.show_text(text)


@app.command("lines")
def lines_command(
    path: Annotated[str, typer.Argument(help="File to print")],
    number: Annotated[bool, typer.Option("--number", "-n", help="Number the lines")] = False,
    _context=None,
) -> None:
    """Print a text file line by line."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        lines = ctx.filesystem.read_file_lines(path)
    ctx.output.show_lines(lines, numbered=number)


@app.command("write")
def write_command(
    path: Annotated[str, typer.Argument(help="File to write")],
    text: Annotated[str, typer.Argument(help="Content")],
    mode: Annotated[str | None, typer.Option("--mode", "-m", help="Octal mode")] = None,
    _context=None,
) -> None:
    """Replace a file's content with TEXT."""
    ctx = _get_context(_context)
    file_mode = None if mode is None else _parse_mode_option(ctx, mode)
    with _fs_errors(ctx):
        ctx.filesystem.write_text_file(path, text, file_mode)
    ctx.output.show_success(f"Wrote {path}")


# ============================================================================
# Link, Rename & Remove Commands
# ============================================================================


@app.command("ln")
def ln_command(
    target: Annotated[str, typer.Argument(help="Existing path (or symlink target)")],
    link_path: Annotated[str, typer.Argument(help="New link")],
    symbolic: Annotated[
        bool, typer.Option("--symbolic", "-s", help="Create a symbolic link")
    ] = False,
    _context=None,
) -> None:
    """Create a hard or symbolic link."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        if symbolic:
            ctx.filesystem.symlink(target, link_path)
        else:
            ctx.filesystem.link(target, link_path)
    ctx.output.show_success(f"Linked {link_path} to {target}")


@app.command("mv")
def mv_command(
    src: Annotated[str, typer.Argument(help="Entry to move")],
    dst: Annotated[str, typer.Argument(help="New path")],
    no_clobber: Annotated[
        bool, typer.Option("--no-clobber", "-n", help="Fail if the destination exists")
    ] = False,
    _context=None,
) -> None:
    """Move or rename an entry."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        ctx.filesystem.rename(src, dst, overwrite=not no_clobber)
    ctx.output.show_success(f"Moved {src} to {dst}")


@app.command("rm")
def rm_command(
    path: Annotated[str, typer.Argument(help="Entry to remove")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Remove directories and their content")
    ] = False,
    _context=None,
) -> None:
    """Remove an entry."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        if recursive:
            ctx.filesystem.remove_all(path)
        else:
            ctx.filesystem.remove(path)
    ctx.output.show_success(f"Removed {path}")


# ============================================================================
# Metadata & Traversal Commands
# ============================================================================


@app.command("chmod")
def chmod_command(
    mode: Annotated[str, typer.Argument(help="Octal mode, e.g. 0644")],
    path: Annotated[str, typer.Argument(help="Path to change")],
    _context=None,
) -> None:
    """Change permission bits."""
    ctx = _get_context(_context)
    parsed = _parse_mode_option(ctx, mode)
    with _fs_errors(ctx):
        ctx.filesystem.chmod(path, parsed)
    ctx.output.show_success(f"Changed mode of {path} to {parsed:04o}")


@app.command("chown")
def chown_command(
    uid: Annotated[int, typer.Argument(help="Owner id, -1 to keep")],
    gid: Annotated[int, typer.Argument(help="Group id, -1 to keep")],
    path: Annotated[str, typer.Argument(help="Path to change")],
    _context=None,
) -> None:
    """Change owner and group."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        ctx.filesystem.chown(path, uid, gid)
    ctx.output.show_success(f"Changed owner of {path} to {uid}:{gid}")


@app.command("walk")
def walk_command(
    root: Annotated[str, typer.Argument(help="Directory to walk")] = ".",
    max_depth: Annotated[
        int | None, typer.Option("--max-depth", "-d", help="Do not descend deeper")
    ] = None,
    hidden: Annotated[bool, typer.Option("--hidden", "-a", help="Include dot entries")] = False,
    _context=None,
) -> None:
    """Print a directory tree."""
    ctx = _get_context(_context)
    failures: list[FsError] = []

    def visit(path: str, entry: WalkEntry | None, error: FsError | None) -> WalkAction:
        if error is not None:
            ctx.output.show_warning(str(error))
            failures.append(error)
            return WalkAction.SKIP
        if entry is None:
            return WalkAction.SKIP
        depth = _walk_depth(root, path)
        if depth > 0 and not hidden and entry.name.startswith("."):
            return WalkAction.SKIP
        ctx.output.show_entry(entry, depth)
        if max_depth is not None and depth >= max_depth:
            return WalkAction.SKIP
        return WalkAction.CONTINUE

    ctx.filesystem.walk_dir(root, visit)
    if failures:
        raise typer.Exit(1)


# ============================================================================
# Path Commands
# ============================================================================


@app.command("cwd")
def cwd_command(_context=None) -> None:
    """Print the working directory."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        ctx.output.show_value(ctx.filesystem.cwd())


@app.command("resolve")
def resolve_command(
    path: Annotated[str, typer.Argument(help="Path to resolve")],
    base: Annotated[
        str, typer.Option("--base", "-b", help="Base directory (working directory if empty)")
    ] = "",
    _context=None,
) -> None:
    """Print the absolute, normalized form of a path."""
    ctx = _get_context(_context)
    with _fs_errors(ctx):
        ctx.output.show_value(ctx.filesystem.resolve(path, base))
