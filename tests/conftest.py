"""Shared pytest fixtures for the create-mutorr-stack test suite.

Provides reusable fixtures for:
- Scaffold configs rooted in a temporary directory
- A fake npm/npx that mimics the Vite generator's output
- A pre-generated Vite skeleton for manifest and template tests
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from create_mutorr_stack.config import ScaffoldConfig
from create_mutorr_stack.utils import CommandResult


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's MUTORR_* variables out of every test."""
    for var in ("MUTORR_NPM", "MUTORR_NPX", "MUTORR_VITE_PACKAGE", "MUTORR_BASE_DIR"):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Vite skeleton
# ---------------------------------------------------------------------------

VITE_MANIFEST: dict[str, Any] = {
    "name": "placeholder",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {
        "dev": "vite",
        "build": "vite build",
        "lint": "eslint .",
        "preview": "vite preview",
    },
    "dependencies": {
        "react": "^18.3.1",
        "react-dom": "^18.3.1",
    },
    "devDependencies": {
        "@vitejs/plugin-react": "^4.3.1",
        "eslint": "^9.9.0",
        "vite": "^5.4.1",
    },
}


def write_vite_skeleton(project_dir: Path, template: str = "react") -> None:
    """Lay out the files ``npm create vite`` would leave behind."""
    project_dir.mkdir(parents=True, exist_ok=True)
    manifest = {**VITE_MANIFEST, "name": project_dir.name}
    if template == "react-ts":
        manifest["devDependencies"] = {
            **manifest["devDependencies"],
            "typescript": "^5.5.3",
        }
    (project_dir / "package.json").write_text(
        json.dumps(manifest, indent=2), encoding="utf-8"
    )
    src = project_dir / "src"
    src.mkdir(exist_ok=True)
    (src / "index.css").write_text(":root { color-scheme: dark; }\n", encoding="utf-8")
    (src / "App.css").write_text("#root { margin: 0 auto; }\n", encoding="utf-8")
    (project_dir / "index.html").write_text("<div id=\"root\"></div>\n", encoding="utf-8")


@pytest.fixture
def make_config(tmp_path: Path):
    """Factory for ``ScaffoldConfig`` instances rooted at ``tmp_path``."""

    def factory(**overrides: Any) -> ScaffoldConfig:
        kwargs: dict[str, Any] = {"project_name": "demo-app", "base_dir": tmp_path}
        kwargs.update(overrides)
        return ScaffoldConfig(**kwargs)

    return factory


@pytest.fixture
def vite_project(make_config):
    """Factory returning a config whose project dir holds a Vite skeleton."""

    def factory(**overrides: Any) -> ScaffoldConfig:
        config = make_config(**overrides)
        write_vite_skeleton(config.project_dir, config.vite_template)
        return config

    return factory


# ---------------------------------------------------------------------------
# Fake npm / npx
# ---------------------------------------------------------------------------

class FakeNpm:
    """Stands in for ``run_command`` in the pipeline module.

    Records every call.  ``npm create`` writes a Vite skeleton unless its
    return code is overridden; other commands only return the configured
    result.  Keys for ``returncodes``/``stderr``: ``create``, ``install``,
    ``tailwind``.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.returncodes: dict[str, int] = {}
        self.stderr: dict[str, str] = {}

    @staticmethod
    def classify(cmd: list[str]) -> str:
        if "tailwindcss" in cmd:
            return "tailwind"
        if len(cmd) > 1 and cmd[1] in ("create", "install"):
            return cmd[1]
        return "other"

    def kinds(self) -> list[str]:
        return [call["kind"] for call in self.calls]

    def call(self, kind: str) -> dict[str, Any]:
        return next(c for c in self.calls if c["kind"] == kind)

    async def __call__(
        self,
        cmd: list[str],
        cwd: str | Path | None = None,
        capture: bool = True,
    ) -> CommandResult:
        kind = self.classify(cmd)
        self.calls.append({"kind": kind, "cmd": list(cmd), "cwd": cwd, "capture": capture})

        code = self.returncodes.get(kind, 0)
        if code != 0:
            return CommandResult(code, "", self.stderr.get(kind, ""))

        if kind == "create":
            name = cmd[3]
            template = cmd[cmd.index("--template") + 1]
            write_vite_skeleton(Path(cwd) / name, template)
        return CommandResult(0, "", "")


@pytest.fixture
def fake_npm():
    """Patch the pipeline's ``run_command`` with a ``FakeNpm``."""
    fake = FakeNpm()
    with patch("create_mutorr_stack.pipeline.run_command", new=fake):
        yield fake
