"""aix: scaffolding tool for Rust + Actix web projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("aix")
except PackageNotFoundError:
    __version__ = "0.0.0"
