"""Boilerplate file contents for generated projects."""

from gosprout.templates._base import gitignore
from gosprout.templates._global import global_config_toml
from gosprout.templates._project import project_main_go, project_readme
from gosprout.templates._simple import simple_main_go, simple_readme

__all__ = [
    "gitignore",
    "global_config_toml",
    "project_main_go",
    "project_readme",
    "simple_main_go",
    "simple_readme",
]
