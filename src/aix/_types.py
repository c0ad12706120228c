"""Enums for project types and extras."""

from enum import Enum


class ProjectType(str, Enum):
    """Layout of the generated project."""

    STANDALONE = "standalone"
    WORKSPACE = "workspace"

    @property
    def label(self) -> str:
        labels: dict[ProjectType, str] = {
            ProjectType.STANDALONE: "Standalone crate",
            ProjectType.WORKSPACE: "Cargo workspace",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[ProjectType, str] = {
            ProjectType.STANDALONE: "A single Actix web crate at the project root.",
            ProjectType.WORKSPACE: "A workspace with the initial Actix crate as its first member.",
        }
        return descriptions[self]


class Extra(str, Enum):
    """Optional file bundles layered onto the base project."""

    CI = "ci"
    DOCKER = "docker"

    @property
    def label(self) -> str:
        labels: dict[Extra, str] = {
            Extra.CI: "GitHub Actions CI",
            Extra.DOCKER: "Docker",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[Extra, str] = {
            Extra.CI: "Check, lint and test workflows in .github/workflows/ci.yml.",
            Extra.DOCKER: "Multi-stage Dockerfile with a distroless runtime, plus .dockerignore.",
        }
        return descriptions[self]
