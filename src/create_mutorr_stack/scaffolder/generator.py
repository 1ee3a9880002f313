"""Source file generation.

Takes a ``ScaffoldConfig`` and writes the stack's own files into a project
that the Vite generator has already created: the ``src/`` directory tree, the
Redux store and counter slice, the entry point, the router and two pages, and
the stylesheets.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, NamedTuple

from jinja2 import TemplateError

from ..config import ScaffoldConfig
from ..errors import ScaffoldError
from .templates import TemplateRenderer

STEP = "templates"

SOURCE_DIRS: tuple[str, ...] = (
    "components",
    "pages",
    "store",
    "features/counter",
    "hooks",
    "utils",
)

LOGO_URL = (
    "https://res.cloudinary.com/dzooftuit/image/upload/v1745995442/logo_ewfpn4.svg"
)


class SourceFile(NamedTuple):
    """One rendered file: template key, path relative to the project root,
    and the label used in failure messages."""

    template: str
    path: str
    label: str


class ProjectGenerator:
    """Writes the stack's source files into an existing Vite project.

    Each file is rendered and written independently; the first failure raises
    ``ScaffoldError`` naming the file, leaving earlier files in place.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self) -> list[Path]:
        """Create the ``src/`` tree and write every source file.

        Returns:
            Paths of the written files, in write order.
        """
        context = self.build_context()
        files = self.source_files()

        # The base stylesheet goes first; the Vite skeleton already has src/.
        written = [await self._write(files[0], context)]
        await self._create_directory_structure()
        for source_file in files[1:]:
            written.append(await self._write(source_file, context))
        return written

    async def write_tailwind_config(self) -> Path:
        """Overwrite ``tailwind.config.js`` with content globs for the sources."""
        return await self._write(
            SourceFile("tailwind.config.js.j2", "tailwind.config.js", "tailwind.config.js"),
            self.build_context(),
        )

    # -- Context / file list -----------------------------------------------

    def build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the config."""
        return {
            "project_name": self.config.project_name,
            "use_typescript": self.config.use_typescript,
            "use_tailwind": self.config.use_tailwind,
            "script_ext": self.config.script_ext,
            "component_ext": self.config.component_ext,
            "logo_url": LOGO_URL,
        }

    def source_files(self) -> list[SourceFile]:
        """Files written by :meth:`generate`, base stylesheet first."""
        ts = self.config.script_ext
        tsx = self.config.component_ext
        return [
            SourceFile("src/index.css.j2", "src/index.css", "index.css"),
            SourceFile("src/store/index.j2", f"src/store/index.{ts}", "store/index"),
            SourceFile(
                "src/features/counter/counterSlice.j2",
                f"src/features/counter/counterSlice.{ts}",
                "counterSlice",
            ),
            SourceFile("src/main.j2", f"src/main.{tsx}", "main"),
            SourceFile("src/App.j2", f"src/App.{tsx}", "App"),
            SourceFile("src/pages/Home.j2", f"src/pages/Home.{tsx}", "Home page"),
            SourceFile("src/pages/Home.css.j2", "src/pages/Home.css", "Home.css"),
            SourceFile("src/pages/About.j2", f"src/pages/About.{tsx}", "About page"),
        ]

    # -- Internals ---------------------------------------------------------

    async def _create_directory_structure(self) -> None:
        for rel in SOURCE_DIRS:
            path = self.config.src_dir / rel
            try:
                await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
            except OSError as exc:
                raise ScaffoldError(
                    STEP, f"Failed to create directory src/{rel}: {exc}"
                ) from exc

    async def _write(self, source_file: SourceFile, context: dict[str, Any]) -> Path:
        output = self.config.project_dir / source_file.path
        try:
            return await asyncio.to_thread(
                self.renderer.render_to_file, source_file.template, output, context
            )
        except (OSError, TemplateError) as exc:
            raise ScaffoldError(
                STEP, f"Failed to create {source_file.label}: {exc}"
            ) from exc
