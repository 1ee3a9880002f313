"""Source file scaffolder.

Renders the Redux store, counter slice, router, pages and stylesheets into a
project the Vite generator has already laid out.

Quick usage::

    from create_mutorr_stack.config import ScaffoldConfig
    from create_mutorr_stack.scaffolder import ProjectGenerator

    config = ScaffoldConfig(project_name="demo-app", use_typescript=True)
    written = await ProjectGenerator(config).generate()
"""

from create_mutorr_stack.scaffolder.generator import (
    SOURCE_DIRS,
    ProjectGenerator,
    SourceFile,
)
from create_mutorr_stack.scaffolder.templates import TemplateRenderer

__all__ = [
    "SOURCE_DIRS",
    "ProjectGenerator",
    "SourceFile",
    "TemplateRenderer",
]
