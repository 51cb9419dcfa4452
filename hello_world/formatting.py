"""Text renderings of the exported mock data."""

from __future__ import annotations

import json

import yaml

from .mock import export


def render_fixture(fmt: str = "json") -> str:
    """Render the mock users and profiles as JSON or YAML text."""
    data = export()
    if fmt == "json":
        return json.dumps(data, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False)
    raise ValueError(f"Unsupported output format '{fmt}'")


__all__ = ["render_fixture"]
