"""Values command group.

Commands:
    tfhelm values render: Merge values files and overrides into values.yaml
"""

from __future__ import annotations

import click

from tfhelm_core.cli.values.render import render_command


@click.group(
    name="values",
    help="Chart values merging commands.",
)
def values() -> None:
    """Values command group."""
    pass


values.add_command(render_command)

__all__: list[str] = ["values"]
