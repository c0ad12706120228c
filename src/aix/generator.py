"""Turns a generation request into files on disk.

The pipeline is linear: validate the request, resolve templates, render them
in memory, check for path collisions, then write. Nothing touches the
filesystem before the write phase, so every error raised earlier leaves the
destination exactly as it was.
"""

from __future__ import annotations

import logging
import re
import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from aix._types import Extra, ProjectType
from aix.errors import (
    DestinationNotADirectoryError,
    DestinationNotEmptyError,
    InvalidProjectNameError,
    PathCollisionError,
    TemplateRenderError,
    WriteError,
)
from aix.templates import Template, TemplateCatalog, default_catalog

logger = logging.getLogger(__name__)

RUST_VERSION = "1.75"

PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")
_PROJECT_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")


@dataclass(frozen=True, kw_only=True)
class GenerationRequest:
    """
    Fully specified input to one generation run.

    Attributes:
        destination: Root directory the project is written to.
        project_name: Substituted for ``{{crate_name}}``.
        extras: Names of the selected extras.
        project_type: Selects the base template set.
        overwrite: Permit writing into a non-empty destination.
    """

    destination: Path
    project_name: str
    extras: frozenset[str] = field(default_factory=frozenset)
    project_type: ProjectType = ProjectType.STANDALONE
    overwrite: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "destination", Path(self.destination))
        object.__setattr__(
            self,
            "extras",
            frozenset(e.value if isinstance(e, Extra) else e for e in self.extras),
        )


@dataclass(frozen=True)
class RenderedFile:
    path: str
    content: str


@dataclass
class GenerationResult:
    """
    Outcome of a successful run.

    Attributes:
        destination: Root the files were written to.
        written: Relative paths of the written files, in write order.
        created_root: Whether the destination did not exist before the run.
    """

    destination: Path
    written: list[str]
    created_root: bool


def validate_project_name(name: str) -> None:
    """
    Reject names that are empty, could escape the destination, or are not
    usable as a Cargo package name.

    Raises:
        InvalidProjectNameError: If the name is not acceptable.
    """
    if not name:
        raise InvalidProjectNameError(name, "name must not be empty")
    if "/" in name or "\\" in name or ".." in name:
        raise InvalidProjectNameError(name, "name must not contain path separators or '..'")
    if not _PROJECT_NAME_RE.fullmatch(name):
        raise InvalidProjectNameError(
            name,
            "use ASCII letters, digits, '-' and '_', starting with a letter or digit",
        )


def template_variables(project_name: str) -> dict[str, str]:
    return {
        "crate_name": project_name,
        "crate_ident": project_name.replace("-", "_"),
        "rust_version": RUST_VERSION,
    }


def interpolate(text: str, variables: dict[str, str], template_path: str) -> str:
    """Replace every ``{{ name }}`` token in *text*. Unknown names are an error."""

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in variables:
            raise TemplateRenderError(template_path, f"unrecognized placeholder {match.group(0)!r}")
        return variables[key]

    return PLACEHOLDER_RE.sub(_replace, text)


def _normalize_path(rendered: str, template_path: str) -> str:
    path = PurePosixPath(rendered)
    if not rendered or path.is_absolute() or ".." in path.parts or path == PurePosixPath("."):
        raise TemplateRenderError(
            template_path, f"output path {rendered!r} is not inside the project root"
        )
    return path.as_posix()


def render_template(template: Template, variables: dict[str, str]) -> RenderedFile:
    """Substitute variables into a template's path and content."""
    path = interpolate(template.path, variables, template.path)
    content = interpolate(template.content, variables, template.path)
    return RenderedFile(path=_normalize_path(path, template.path), content=content)


def render_all(templates: Iterable[Template], project_name: str) -> list[RenderedFile]:
    """Render every template in memory, failing on the first bad one."""
    variables = template_variables(project_name)
    return [render_template(t, variables) for t in templates]


def check_collisions(files: Iterable[RenderedFile]) -> None:
    """
    Raises:
        PathCollisionError: If two files share an output path, or one file
            would have to be the parent directory of another.
    """
    files = list(files)
    seen: set[str] = set()
    for f in files:
        if f.path in seen:
            raise PathCollisionError(f.path)
        seen.add(f.path)

    for f in files:
        for parent in PurePosixPath(f.path).parents:
            if parent.as_posix() in seen:
                raise PathCollisionError(parent.as_posix())


def _check_destination(destination: Path, overwrite: bool) -> bool:
    """Return whether the destination still has to be created."""
    try:
        if not destination.exists():
            return True
        if not destination.is_dir():
            raise DestinationNotADirectoryError(destination)
        if not overwrite and any(destination.iterdir()):
            raise DestinationNotEmptyError(destination)
    except OSError as err:
        raise WriteError(destination, err, []) from err
    return False


def _first_missing(path: Path) -> Path:
    """Top-most ancestor of *path* (or *path* itself) that does not exist yet."""
    missing = path
    for parent in path.parents:
        if parent.exists():
            break
        missing = parent
    return missing


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _cleanup(created: Path) -> bool:
    """Remove *created* and report whether it is gone."""
    logger.info("Removing %s created by this run", created)
    try:
        shutil.rmtree(created)
    except OSError as err:
        logger.warning("Could not remove %s: %s", created, err)
        return False
    return True


def write_files(destination: Path, files: list[RenderedFile], create_root: bool) -> list[str]:
    """
    Write rendered files below *destination*.

    When the write phase fails and *create_root* is set, the directory tree
    created for the destination is removed again. A pre-existing destination
    is never removed.

    Raises:
        WriteError: On the first file that cannot be written.
    """
    created = _first_missing(destination) if create_root else None
    written: list[str] = []

    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        removed = created is not None and created.exists() and _cleanup(created)
        raise WriteError(destination, err, written, removed=removed) from err

    for f in files:
        target = destination / f.path
        try:
            _write_file(target, f.content)
        except OSError as err:
            logger.debug("Write of %s failed after %d files", target, len(written))
            removed = created is not None and _cleanup(created)
            raise WriteError(target, err, written, removed=removed) from err
        written.append(f.path)
        logger.debug("Wrote %s", target)

    return written


def generate(
    request: GenerationRequest, catalog: TemplateCatalog | None = None
) -> GenerationResult:
    """
    Generate a project from *request*.

    Args:
        request: What to generate and where.
        catalog: Template catalogue, the bundled one by default.

    Raises:
        InvalidProjectNameError: The project name is not acceptable.
        DestinationNotADirectoryError: The destination is an existing file.
        DestinationNotEmptyError: The destination has content and overwrite is off.
        UnknownExtraError: An extra is not in the catalogue.
        TemplateRenderError: A template holds an unknown placeholder or a bad path.
        PathCollisionError: Two templates render to the same path.
        WriteError: A file could not be written.
    """
    validate_project_name(request.project_name)
    create_root = _check_destination(request.destination, request.overwrite)

    catalog = catalog or default_catalog()
    templates = catalog.resolve_templates(request.extras, request.project_type)

    files = render_all(templates, request.project_name)
    check_collisions(files)

    logger.info(
        "Writing %d files for %s to %s", len(files), request.project_name, request.destination
    )
    written = write_files(request.destination, files, create_root)
    return GenerationResult(
        destination=request.destination, written=written, created_root=create_root
    )
