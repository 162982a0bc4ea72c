"""Manifest command group.

Commands:
    tfhelm manifest json: Convert a rendered manifest to redacted JSON
"""

from __future__ import annotations

import click

from tfhelm_core.cli.manifest.convert import json_command


@click.group(
    name="manifest",
    help="Rendered manifest commands.",
)
def manifest() -> None:
    """Manifest command group."""
    pass


manifest.add_command(json_command)

__all__: list[str] = ["manifest"]
