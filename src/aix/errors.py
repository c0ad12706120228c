"""Errors raised while generating a project.

Every error is terminal for the current invocation. Each kind carries a
distinct ``exit_code`` used by the CLI.
"""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Base class for all generation failures."""

    exit_code: int = 1


class InvalidProjectNameError(GenerationError):
    exit_code = 3

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid project name {name!r}: {reason}.")


class UnknownExtraError(GenerationError):
    exit_code = 4

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        valid = ", ".join(f"'{k}'" for k in known) or "none"
        super().__init__(f"Unknown extra {name!r}. Valid values: {valid}.")


class DestinationNotEmptyError(GenerationError):
    exit_code = 5

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory '{path}' is not empty. Use --force to write into it anyway.")


class PathCollisionError(GenerationError):
    exit_code = 6

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"More than one template renders to '{path}'.")


class TemplateRenderError(GenerationError):
    exit_code = 7

    def __init__(self, template_path: str, reason: str) -> None:
        self.template_path = template_path
        self.reason = reason
        super().__init__(f"Cannot render template '{template_path}': {reason}.")


class WriteError(GenerationError):
    """Writing a rendered file failed.

    ``written`` lists the files (relative to the destination) that were
    written before the failure, in write order. ``removed`` is set when the
    destination was created by the failed run and has been deleted again.
    """

    exit_code = 8

    def __init__(
        self, path: Path, cause: OSError, written: list[str], *, removed: bool = False
    ) -> None:
        self.path = path
        self.cause = cause
        self.written = written
        self.removed = removed
        super().__init__(f"Failed to write '{path}': {cause.strerror or cause}.")


class DestinationNotADirectoryError(GenerationError):
    exit_code = 9

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Path '{path}' exists and is not a directory.")
