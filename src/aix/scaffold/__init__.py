"""Bundled template files. Read through importlib.resources only."""
