"""cppgen scaffolder -- writes C/C++ project skeletons.

Quick usage::

    from cppgen.config import ProjectConfig
    from cppgen.scaffolder import ProjectGenerator

    config = ProjectConfig.create("my-project", "cpp")
    project_path = ProjectGenerator(config).generate("/tmp/output")
"""

from cppgen.scaffolder.generator import PROJECT_DIRS, ProjectGenerator
from cppgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "PROJECT_DIRS",
    "ProjectGenerator",
    "TemplateRenderer",
]
