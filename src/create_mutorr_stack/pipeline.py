"""Scaffolding pipeline orchestrator.

Runs the five steps of a scaffold, strictly in order:

1. WORKSPACE -- create ``<base_dir>/<name>`` and run the Vite generator in it.
2. MANIFEST  -- merge the stack's dependencies and scripts into package.json.
3. INSTALL   -- ``npm install``.
4. TAILWIND  -- ``npx tailwindcss init -p`` plus tailwind.config.js (optional).
5. TEMPLATES -- write store, slice, router, pages and stylesheets.

Every step except the Tailwind initializer is fatal on failure.
"""

from __future__ import annotations

from pathlib import Path

from .config import ScaffoldConfig
from .errors import ScaffoldError
from .manifest import update_manifest
from .scaffolder import ProjectGenerator
from .utils import (
    console,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
    run_command,
)


def _describe_failure(message: str, returncode: int, stderr: str) -> str:
    text = f"{message} (exit status {returncode})"
    if stderr:
        text += f"\n{stderr}"
    return text


class Pipeline:
    """Drives one scaffold from an empty target directory to a ready project.

    Attributes:
        config: Choices gathered by the CLI.
        generator: Writes the stack's source files once the skeleton exists.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        generator: ProjectGenerator | None = None,
    ) -> None:
        self.config = config
        self.generator = generator or ProjectGenerator(config)

    async def run(self) -> Path:
        """Execute every step and return the project directory.

        Raises:
            ScaffoldError: On the first fatal failure.
        """
        await self.init_workspace()
        await self.augment_manifest()
        await self.install_dependencies()
        if self.config.use_tailwind:
            await self.setup_tailwind()
        await self.write_sources()
        self._print_final_summary()
        return self.config.project_dir

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    async def init_workspace(self) -> None:
        """Create the project directory and populate it with the Vite skeleton."""
        name = self.config.project_name
        project_dir = self.config.project_dir
        if project_dir.exists():
            raise ScaffoldError(
                "workspace",
                f"Directory {name} already exists. Please choose a different name.",
            )
        try:
            project_dir.mkdir(parents=True)
        except OSError as exc:
            raise ScaffoldError(
                "workspace", f"Failed to create directory {project_dir}: {exc}"
            ) from exc

        print_step(f"Initializing Vite project ({self.config.vite_template})...")
        tool = self.config.toolchain
        result = await run_command(
            [
                tool.npm, "create", tool.vite_package, name,
                "--", "--template", self.config.vite_template,
            ],
            cwd=self.config.base_dir,
            capture=True,
        )
        if not result.ok:
            raise ScaffoldError(
                "workspace",
                _describe_failure(
                    "Failed to initialize Vite project", result.returncode, result.stderr
                ),
            )

    async def augment_manifest(self) -> None:
        """Merge the stack's packages and scripts into package.json."""
        print_step("Updating package.json...")
        try:
            update_manifest(self.config.manifest_path, self.config.use_tailwind)
        except (OSError, ValueError) as exc:
            raise ScaffoldError(
                "manifest", f"Failed to update package.json: {exc}"
            ) from exc

    async def install_dependencies(self) -> None:
        """Install everything declared in the manifest with live output."""
        print_step("Installing dependencies...")
        result = await run_command(
            [self.config.toolchain.npm, "install"],
            cwd=self.config.project_dir,
            capture=False,
        )
        if not result.ok:
            raise ScaffoldError(
                "install",
                _describe_failure(
                    "Failed to install dependencies", result.returncode, result.stderr
                ),
            )

    async def setup_tailwind(self) -> None:
        """Run the Tailwind initializer, then write tailwind.config.js.

        A failing initializer is reported as a warning and the run goes on.
        """
        print_step("Initializing Tailwind CSS...")
        result = await run_command(
            [self.config.toolchain.npx, "tailwindcss", "init", "-p"],
            cwd=self.config.project_dir,
            capture=False,
        )
        if not result.ok:
            print_warning(
                _describe_failure(
                    "Failed to initialize Tailwind CSS", result.returncode, result.stderr
                )
            )
        await self.generator.write_tailwind_config()

    async def write_sources(self) -> None:
        """Write the store, slice, router, pages and stylesheets."""
        print_step("Writing source files...")
        written = await self.generator.generate()
        for path in written:
            console.print(
                f"  [green]+[/green] {path.relative_to(self.config.project_dir).as_posix()}"
            )

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _print_final_summary(self) -> None:
        name = self.config.project_name
        print_success(f"Project {name} created successfully!")

        features = {
            "UI components": "Material-UI",
            "State management": "Redux Toolkit",
            "Routing": "React Router DOM",
        }
        if self.config.use_typescript:
            features["Type safety"] = "TypeScript"
        if self.config.use_tailwind:
            features["Styling"] = "Tailwind CSS"
        print_summary_table(features, title="Features included")

        console.print("To get started:")
        console.print(f"  cd {name}")
        console.print("  npm run dev")
