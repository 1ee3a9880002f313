"""package.json augmentation.

Merges the stack's fixed runtime dependencies, the optional Tailwind tooling
and the Vite run/build/preview scripts into the manifest produced by the Vite
generator.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .utils import load_json, save_json

# ---------------------------------------------------------------------------
# Fixed package sets
# ---------------------------------------------------------------------------

RUNTIME_DEPENDENCIES: dict[str, str] = {
    "@mui/material": "^5.16.0",
    "@emotion/react": "^11.13.0",
    "@emotion/styled": "^11.13.0",
    "@reduxjs/toolkit": "^2.2.0",
    "react-router-dom": "^6.26.0",
    "react-redux": "^9.1.2",
}

TAILWIND_DEV_DEPENDENCIES: dict[str, str] = {
    "tailwindcss": "^3.4.0",
    "postcss": "^8.4.0",
    "autoprefixer": "^10.4.0",
}

SCRIPTS: dict[str, str] = {
    "start": "vite",
    "build": "vite build",
    "preview": "vite preview",
}


def augment_manifest(manifest: dict[str, Any], use_tailwind: bool) -> dict[str, Any]:
    """Merge the fixed sections into *manifest* in place and return it.

    Entries already present in the manifest survive unless the stack pins the
    same package (or script), in which case the stack's value wins.
    """
    manifest["dependencies"] = {
        **(manifest.get("dependencies") or {}),
        **RUNTIME_DEPENDENCIES,
    }

    if use_tailwind:
        manifest["devDependencies"] = {
            **(manifest.get("devDependencies") or {}),
            **TAILWIND_DEV_DEPENDENCIES,
        }

    manifest["scripts"] = {
        **(manifest.get("scripts") or {}),
        **SCRIPTS,
    }
    return manifest


def update_manifest(path: str | Path, use_tailwind: bool) -> dict[str, Any]:
    """Read, augment and rewrite the manifest at *path*.

    Raises:
        OSError: If the file cannot be read or written.
        ValueError: If it is not a JSON object (``json.JSONDecodeError`` is a
            ``ValueError`` subclass).
    """
    manifest = load_json(path)
    augment_manifest(manifest, use_tailwind)
    save_json(manifest, path)
    return manifest
