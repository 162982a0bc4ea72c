"""``tfhelm values render`` command implementation.

Merges values files and ``--set`` style overrides exactly as a release
would, and prints the resulting values.yaml with sensitive entries masked.

Example:
    $ tfhelm values render -f values.yaml --set image.tag=1.2.3
    $ tfhelm values render -f base.yaml -f prod.yaml --set-sensitive db.password=s3cr3t
    $ tfhelm values render --set-list ingress.hosts=a.example.com,b.example.com -o out.yaml
"""

from __future__ import annotations

from pathlib import Path

import click
import yaml

from tfhelm_core.cli.utils import ExitCode, error_exit, info, split_assignment, success
from tfhelm_core.values import (
    ListOverride,
    RedactionConfig,
    ScalarOverride,
    ValueKind,
    ValueOverrideEngine,
    ValuesConfig,
    ValuesError,
)


@click.command(
    name="render",
    help="""\b
Render merged chart values.

Values files are merged in order, then --set, --set-string and
--set-literal overrides, then --set-sensitive overrides, then
--set-list overrides. Sensitive values are masked in the output
unless --show-sensitive is given.

Examples:
    $ tfhelm values render -f values.yaml --set replicaCount=3
    $ tfhelm values render --set-literal resources='{limits: {cpu: 1}}'
""",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--values",
    "-f",
    "values_files",
    type=click.Path(dir_okay=False, path_type=Path),
    multiple=True,
    help="Values file to merge. Can be repeated.",
    metavar="PATH",
)
@click.option(
    "--set",
    "set_values",
    multiple=True,
    help="Override a value with type inference. Can be repeated.",
    metavar="KEY=VALUE",
)
@click.option(
    "--set-string",
    "set_strings",
    multiple=True,
    help="Override a value, always as a string. Can be repeated.",
    metavar="KEY=VALUE",
)
@click.option(
    "--set-literal",
    "set_literals",
    multiple=True,
    help="Override a value with a YAML literal. Can be repeated.",
    metavar="KEY=VALUE",
)
@click.option(
    "--set-list",
    "set_lists",
    multiple=True,
    help="Override a list value from comma-separated items. Can be repeated.",
    metavar="KEY=V1,V2",
)
@click.option(
    "--set-sensitive",
    "set_sensitive",
    multiple=True,
    help="Override a sensitive value (masked in output). Can be repeated.",
    metavar="KEY=VALUE",
)
@click.option(
    "--show-sensitive",
    is_flag=True,
    default=False,
    help="Print sensitive values unmasked.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write values to a file instead of stdout.",
    metavar="PATH",
)
def render_command(
    values_files: tuple[Path, ...],
    set_values: tuple[str, ...],
    set_strings: tuple[str, ...],
    set_literals: tuple[str, ...],
    set_lists: tuple[str, ...],
    set_sensitive: tuple[str, ...],
    show_sensitive: bool,
    output: Path | None,
) -> None:
    """Render merged chart values."""
    documents: list[str] = []
    for values_file in values_files:
        if not values_file.exists():
            error_exit(
                "Values file not found",
                exit_code=ExitCode.FILE_NOT_FOUND,
                path=str(values_file),
            )
        info(f"Loading values from: {values_file}")
        documents.append(values_file.read_text(encoding="utf-8"))

    overrides = [
        *_scalar_overrides(set_values, "--set", ValueKind.AUTO),
        *_scalar_overrides(set_strings, "--set-string", ValueKind.STRING),
        *_scalar_overrides(set_literals, "--set-literal", ValueKind.LITERAL),
    ]
    list_overrides = []
    for item in set_lists:
        key, value = split_assignment(item, "--set-list")
        list_overrides.append(ListOverride(path=key, values=value.split(",") if value else []))

    config = ValuesConfig(
        values=documents,
        set_values=overrides,
        set_list=list_overrides,
        set_sensitive=_scalar_overrides(set_sensitive, "--set-sensitive", ValueKind.AUTO),
    )
    engine = ValueOverrideEngine(RedactionConfig())

    try:
        tree = engine.merge_config(config)
    except ValuesError as e:
        error_exit(str(e), exit_code=ExitCode.VALIDATION_ERROR)

    if show_sensitive:
        rendered = yaml.safe_dump(tree, default_flow_style=False, sort_keys=True)
    else:
        rendered = engine.render(tree, config.sensitive_paths())

    if output is None:
        click.echo(rendered, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")
    success(f"Rendered values: {output}")


def _scalar_overrides(items: tuple[str, ...], option: str, kind: ValueKind) -> list[ScalarOverride]:
    overrides = []
    for item in items:
        key, value = split_assignment(item, option)
        overrides.append(ScalarOverride(path=key, value=value, kind=kind.value))
    return overrides


__all__: list[str] = ["render_command"]
