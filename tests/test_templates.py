"""Tests for the template catalogue."""

from __future__ import annotations

import itertools

import pytest

from aix._types import Extra, ProjectType
from aix.errors import UnknownExtraError
from aix.templates import TemplateCatalog, default_catalog, resolve_templates

ALL_EXTRA_SUBSETS = [
    set(combo) for n in range(len(Extra) + 1) for combo in itertools.combinations(Extra, n)
]


class TestResolveTemplates:
    def test_base_first_then_extras_by_name(self, small_catalog: TemplateCatalog) -> None:
        paths = [t.path for t in small_catalog.resolve_templates({"zeta", "alpha"})]
        assert paths == [
            "README.md",
            "src/{{crate_name}}.txt",
            "alpha/a.txt",
            "alpha/b.txt",
            "zeta.txt",
        ]

    def test_no_extras_yields_base_only(self, small_catalog: TemplateCatalog) -> None:
        paths = [t.path for t in small_catalog.resolve_templates()]
        assert paths == ["README.md", "src/{{crate_name}}.txt"]

    def test_unknown_extra_raises(self, small_catalog: TemplateCatalog) -> None:
        with pytest.raises(UnknownExtraError) as exc_info:
            small_catalog.resolve_templates({"alpha", "bogus"})
        assert exc_info.value.name == "bogus"
        assert exc_info.value.known == ["alpha", "zeta"]

    def test_accepts_enum_members(self) -> None:
        paths = {t.path for t in resolve_templates([Extra.DOCKER])}
        assert "Dockerfile" in paths

    def test_duplicate_names_are_ignored(self, small_catalog: TemplateCatalog) -> None:
        once = small_catalog.resolve_templates(["zeta"])
        twice = small_catalog.resolve_templates(["zeta", "zeta"])
        assert once == twice


class TestDefaultCatalog:
    def test_is_cached(self) -> None:
        assert default_catalog() is default_catalog()

    def test_extra_names(self) -> None:
        assert default_catalog().extra_names == ["ci", "docker"]

    def test_dot_prefix_is_mapped(self) -> None:
        catalog = default_catalog()
        docker = {t.path for t in catalog.extras["docker"]}
        ci = {t.path for t in catalog.extras["ci"]}
        assert docker == {"Dockerfile", ".dockerignore"}
        assert ci == {".github/workflows/ci.yml"}

    def test_standalone_base(self) -> None:
        paths = {t.path for t in default_catalog().base[ProjectType.STANDALONE]}
        assert paths == {
            ".gitignore",
            "Cargo.toml",
            "README.md",
            "src/env.rs",
            "src/error.rs",
            "src/lib.rs",
            "src/main.rs",
        }

    def test_workspace_nests_crate(self) -> None:
        paths = {t.path for t in default_catalog().base[ProjectType.WORKSPACE]}
        assert "Cargo.toml" in paths
        assert "{{crate_name}}/Cargo.toml" in paths
        assert "{{crate_name}}/src/main.rs" in paths
        assert "src/main.rs" not in paths

    def test_no_packaging_files_leak(self) -> None:
        catalog = default_catalog()
        every = [t for ts in catalog.base.values() for t in ts]
        every += [t for ts in catalog.extras.values() for t in ts]
        for t in every:
            assert "__init__" not in t.path
            assert "__pycache__" not in t.path
            assert "dot-" not in t.path

    @pytest.mark.parametrize("project_type", list(ProjectType))
    @pytest.mark.parametrize("extras", ALL_EXTRA_SUBSETS)
    def test_resolved_paths_are_unique(
        self, project_type: ProjectType, extras: set[Extra]
    ) -> None:
        paths = [t.path for t in resolve_templates(extras, project_type)]
        assert len(paths) == len(set(paths))
