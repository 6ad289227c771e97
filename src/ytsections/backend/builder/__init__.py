"""Download command builders."""

from .command_builder import build_command, build_from_options

__all__ = ["build_command", "build_from_options"]
