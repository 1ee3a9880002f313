"""Scaffolder configuration.

Typed configuration for a single scaffolding run.  All settings use Pydantic v2
models so the project name is validated at construction time and the whole
record can be serialised for debugging without boiler-plate.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_PROJECT_NAME = "my-react-app"

PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")

PROJECT_NAME_HINT = (
    "Project name must contain only lowercase letters, numbers, and hyphens "
    "(e.g., my-app)."
)


class ToolchainConfig(BaseModel):
    """Names of the external commands the pipeline shells out to."""

    npm: str = Field(default="npm")
    npx: str = Field(default="npx")
    vite_package: str = Field(
        default="vite@latest", description="Package spec passed to `npm create`"
    )


class ScaffoldConfig(BaseModel):
    """Everything gathered once per run.

    Instances are created by the CLI entry point after the prompts have been
    answered and then passed unchanged through every pipeline step.
    """

    project_name: str = Field(default=DEFAULT_PROJECT_NAME)
    use_typescript: bool = Field(default=False)
    use_tailwind: bool = Field(default=False)
    base_dir: Path = Field(default_factory=Path.cwd)
    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)

    @field_validator("project_name")
    @classmethod
    def check_project_name(cls, value: str) -> str:
        if not PROJECT_NAME_PATTERN.fullmatch(value):
            raise ValueError(PROJECT_NAME_HINT)
        return value

    # ------------------------------------------------------------------
    # Derived values (read-only properties)
    # ------------------------------------------------------------------

    @property
    def project_dir(self) -> Path:
        """Target directory; must not exist before the run."""
        return self.base_dir / self.project_name

    @property
    def src_dir(self) -> Path:
        return self.project_dir / "src"

    @property
    def manifest_path(self) -> Path:
        """The generated ``package.json``."""
        return self.project_dir / "package.json"

    @property
    def vite_template(self) -> str:
        return "react-ts" if self.use_typescript else "react"

    @property
    def script_ext(self) -> str:
        """Extension for plain modules (store, slices)."""
        return "ts" if self.use_typescript else "js"

    @property
    def component_ext(self) -> str:
        """Extension for JSX modules (entry point, router, pages)."""
        return "tsx" if self.use_typescript else "jsx"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            MUTORR_NPM, MUTORR_NPX, MUTORR_VITE_PACKAGE, MUTORR_BASE_DIR.

        Keyword arguments take precedence over the environment.
        """
        toolchain_kwargs: dict[str, Any] = {}
        if os.environ.get("MUTORR_NPM"):
            toolchain_kwargs["npm"] = os.environ["MUTORR_NPM"]
        if os.environ.get("MUTORR_NPX"):
            toolchain_kwargs["npx"] = os.environ["MUTORR_NPX"]
        if os.environ.get("MUTORR_VITE_PACKAGE"):
            toolchain_kwargs["vite_package"] = os.environ["MUTORR_VITE_PACKAGE"]

        kwargs: dict[str, Any] = {"toolchain": ToolchainConfig(**toolchain_kwargs)}
        if os.environ.get("MUTORR_BASE_DIR"):
            kwargs["base_dir"] = Path(os.environ["MUTORR_BASE_DIR"])

        kwargs.update(overrides)
        return cls(**kwargs)
