"""Command-line entry point.

Usage::

    create-mutorr-stack my-app
    create-mutorr-stack my-app --typescript --no-tailwind
    python -m create_mutorr_stack my-app -y
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Callable, Sequence

from pydantic import ValidationError
from rich.panel import Panel
from rich.prompt import Confirm

from . import __version__
from .config import (
    DEFAULT_PROJECT_NAME,
    PROJECT_NAME_HINT,
    ScaffoldConfig,
)
from .errors import InvalidProjectNameError, ScaffoldError
from .pipeline import Pipeline
from .utils import console, print_error

TYPESCRIPT_QUESTION = "Would you like to use TypeScript?"
TAILWIND_QUESTION = "Would you like to include Tailwind CSS?"

# (question, default) -> answer
Asker = Callable[[str, bool], bool]


def _confirm(question: str, default: bool) -> bool:
    return Confirm.ask(question, default=default, console=console)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-mutorr-stack",
        description=(
            "Scaffold a Vite + React app with Material-UI, Redux Toolkit and "
            "React Router"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-mutorr-stack my-app\n"
            "  create-mutorr-stack my-app --typescript --tailwind\n"
            "  create-mutorr-stack my-app -y\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=DEFAULT_PROJECT_NAME,
        help=f"Directory to create (default: {DEFAULT_PROJECT_NAME})",
    )
    parser.add_argument(
        "--typescript",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use TypeScript (asked interactively when omitted)",
    )
    parser.add_argument(
        "--tailwind",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include Tailwind CSS (asked interactively when omitted)",
    )
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Do not prompt; unanswered choices take their default (no)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def resolve_config(
    args: argparse.Namespace,
    ask: Asker = _confirm,
) -> ScaffoldConfig:
    """Validate the name, announce the project, then collect the two choices.

    Raises:
        InvalidProjectNameError: Before any prompt is shown.
    """
    name = args.project_name
    try:
        config = ScaffoldConfig.from_env(project_name=name)
    except ValidationError as exc:
        raise InvalidProjectNameError(name, PROJECT_NAME_HINT) from exc

    console.print(
        Panel(f"[bold]Creating a new React project: {name}...[/bold]", style="cyan")
    )

    use_typescript = args.typescript
    if use_typescript is None:
        use_typescript = False if args.yes else ask(TYPESCRIPT_QUESTION, False)

    use_tailwind = args.tailwind
    if use_tailwind is None:
        use_tailwind = False if args.yes else ask(TAILWIND_QUESTION, False)

    return config.model_copy(
        update={"use_typescript": use_typescript, "use_tailwind": use_tailwind}
    )


def main(argv: Sequence[str] | None = None, ask: Asker = _confirm) -> None:
    """CLI entry point for ``create-mutorr-stack``.

    Exits with status 1 on any fatal failure; a Tailwind initializer failure
    only prints a warning.
    """
    args = build_parser().parse_args(argv)
    try:
        config = resolve_config(args, ask)
        asyncio.run(Pipeline(config).run())
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
