"""Shared fixtures for the aix test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from aix._types import ProjectType
from aix.templates import Template, TemplateCatalog


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    return tmp_path / "my-service"


@pytest.fixture
def three_file_catalog() -> TemplateCatalog:
    """A base set of three files written in path order: a, b, c."""
    return TemplateCatalog(
        base={
            ProjectType.STANDALONE: (
                Template("a.txt", "first {{crate_name}}"),
                Template("b.txt", "second {{crate_name}}"),
                Template("c.txt", "third {{crate_name}}"),
            ),
        },
    )


@pytest.fixture
def small_catalog() -> TemplateCatalog:
    return TemplateCatalog(
        base={
            ProjectType.STANDALONE: (
                Template("README.md", "# {{ crate_name }}\n"),
                Template("src/{{crate_name}}.txt", "{{crate_ident}}"),
            ),
        },
        extras={
            "zeta": (Template("zeta.txt", "z"),),
            "alpha": (Template("alpha/b.txt", "b"), Template("alpha/a.txt", "a")),
        },
    )
