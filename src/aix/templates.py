"""Catalogue of bundled templates and the extras layered on top of them."""

from __future__ import annotations

import importlib.resources as ilr
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from functools import cache
from typing import TYPE_CHECKING

from aix._types import Extra, ProjectType
from aix.errors import UnknownExtraError

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)

SCAFFOLD_PACKAGE = "aix.scaffold"

# Resource files cannot reliably start with "." inside a wheel, so a leading
# "dot-" on any path segment stands for ".".
_DOT_PREFIX = "dot-"
_IGNORED_NAMES = frozenset({"__init__.py", "__pycache__"})


@dataclass(frozen=True)
class Template:
    """A relative output path and a content body, both possibly holding placeholders."""

    path: str
    content: str


@dataclass(frozen=True)
class TemplateCatalog:
    """
    Templates grouped by project type (the base set) and by extra name.

    Attributes:
        base: Base templates for each project type.
        extras: Templates contributed by each extra, keyed by extra name.
    """

    base: Mapping[ProjectType, tuple[Template, ...]]
    extras: Mapping[str, tuple[Template, ...]] = field(default_factory=dict)

    @property
    def extra_names(self) -> list[str]:
        return sorted(self.extras)

    def resolve_templates(
        self,
        selected_extras: Iterable[str | Extra] = (),
        project_type: ProjectType = ProjectType.STANDALONE,
    ) -> list[Template]:
        """
        Return the base templates followed by those of every selected extra.

        Base templates come first, sorted by path. Extras follow in lexicographic
        name order, each sorted by path. Duplicate extra names are ignored.

        Raises:
            UnknownExtraError: If an extra name is not in the catalogue.
        """
        names = {_extra_name(e) for e in selected_extras}
        for name in sorted(names):
            if name not in self.extras:
                raise UnknownExtraError(name, self.extra_names)

        templates = sorted(self.base[project_type], key=lambda t: t.path)
        for name in sorted(names):
            templates.extend(sorted(self.extras[name], key=lambda t: t.path))

        logger.debug(
            "Resolved %d templates for %s project with extras %s",
            len(templates),
            project_type.value,
            sorted(names) or "none",
        )
        return templates


def _extra_name(extra: str | Extra) -> str:
    return extra.value if isinstance(extra, Extra) else extra


def _output_segment(name: str) -> str:
    if name.startswith(_DOT_PREFIX):
        return "." + name[len(_DOT_PREFIX) :]
    return name


def _walk(root: Traversable, prefix: tuple[str, ...] = ()) -> Iterator[tuple[str, Traversable]]:
    """Yield ``(output_path, resource)`` for every file below *root*."""
    for entry in sorted(root.iterdir(), key=lambda e: e.name):
        if entry.name in _IGNORED_NAMES:
            continue
        parts = (*prefix, _output_segment(entry.name))
        if entry.is_dir():
            yield from _walk(entry, parts)
        else:
            yield "/".join(parts), entry


def load_templates(directory: str, prefix: str = "") -> tuple[Template, ...]:
    """
    Load every file under a bundled scaffold directory as a template.

    Args:
        directory: Slash-separated directory relative to the scaffold package.
        prefix: Optional path prepended to every output path.
    """
    root = ilr.files(SCAFFOLD_PACKAGE)
    for part in directory.split("/"):
        root = root.joinpath(part)

    templates = tuple(
        Template(
            path=f"{prefix}/{path}" if prefix else path,
            content=resource.read_text(encoding="utf-8"),
        )
        for path, resource in _walk(root)
    )
    logger.debug("Loaded %d templates from %s/%s", len(templates), SCAFFOLD_PACKAGE, directory)
    return templates


@cache
def default_catalog() -> TemplateCatalog:
    """The catalogue bundled with the package. Loaded once."""
    crate = load_templates("crate")
    return TemplateCatalog(
        base={
            ProjectType.STANDALONE: (*load_templates("standalone"), *crate),
            # The workspace scaffolds the initial crate as a member named after the project.
            ProjectType.WORKSPACE: (
                *load_templates("workspace"),
                *load_templates("crate", prefix="{{crate_name}}"),
            ),
        },
        extras={
            Extra.CI.value: load_templates("extras/ci"),
            Extra.DOCKER.value: load_templates("extras/docker"),
        },
    )


def resolve_templates(
    selected_extras: Iterable[str | Extra] = (),
    project_type: ProjectType = ProjectType.STANDALONE,
    catalog: TemplateCatalog | None = None,
) -> list[Template]:
    """Resolve templates against *catalog*, or the bundled one when omitted."""
    return (catalog or default_catalog()).resolve_templates(selected_extras, project_type)
