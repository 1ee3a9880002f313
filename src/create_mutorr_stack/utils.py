"""Shared utility functions for the scaffolder.

Provides async command execution, JSON I/O, a file-writing helper and Rich-based
progress reporting.  Errors and warnings go to stderr; everything else goes to
stdout.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, NamedTuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


class CommandResult(NamedTuple):
    """Outcome of an external command.  ``stdout``/``stderr`` are empty when
    the streams were inherited instead of captured."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    capture: bool = True,
) -> CommandResult:
    """Run an external command asynchronously.

    Standard input is always inherited so that interactive generators can
    still ask the operator questions.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams and the operator sees live output).

    Returns:
        A ``CommandResult``.  An executable that is missing or cannot be run (not
        executable, a directory) is reported as return code 127 with an
        explanatory ``stderr`` rather than raised.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=stdout_pipe,
            stderr=stderr_pipe,
            cwd=str(cwd) if cwd else None,
        )
    except FileNotFoundError:
        return CommandResult(127, "", f"Command not found: {cmd[0]}")
    except OSError as exc:
        return CommandResult(127, "", f"Cannot run {cmd[0]}: {exc}")

    stdout_bytes, stderr_bytes = await process.communicate()
    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return CommandResult(process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load a JSON file whose root must be an object.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return data


def save_json(data: dict[str, Any], path: str | Path) -> None:
    """Write *data* as 2-space indented JSON with a trailing newline.

    Key order is preserved so diffs against the original stay small.
    """
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    Path(path).write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    return out


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print a progress line for a pipeline step."""
    console.print(f"[bold cyan]>[/bold cyan] {escape(message)}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message on stderr."""
    err_console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()
