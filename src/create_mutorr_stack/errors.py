"""Exceptions raised by the scaffolding pipeline."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Raised when a pipeline step fails irrecoverably.

    The CLI turns every ``ScaffoldError`` into a message on stderr and exit
    status 1.  Nothing created before the failure is rolled back.
    """

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        self.message = message
        super().__init__(f"{step}: {message}")


class InvalidProjectNameError(ScaffoldError):
    """The project name contains characters outside ``[a-z0-9-]``."""

    def __init__(self, name: str, hint: str) -> None:
        self.name = name
        super().__init__("input", f"Invalid project name {name!r}. {hint}")
