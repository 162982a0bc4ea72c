"""``tfhelm manifest json`` command implementation.

Example:
    $ helm template web ./chart > rendered.yaml
    $ tfhelm manifest json rendered.yaml --sensitive-value s3cr3t
"""

from __future__ import annotations

from pathlib import Path

import click

from tfhelm_core.cli.utils import ExitCode, error_exit, success
from tfhelm_core.values import ManifestError, redact_manifest


@click.command(
    name="json",
    help="Convert a rendered manifest to JSON keyed by resource, with secrets masked.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument(
    "manifest_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--sensitive-value",
    "sensitive_values",
    multiple=True,
    help="Literal value to mask wherever it appears. Can be repeated.",
    metavar="VALUE",
)
def json_command(manifest_file: Path, sensitive_values: tuple[str, ...]) -> None:
    """Convert a rendered manifest to redacted JSON."""
    text = manifest_file.read_text(encoding="utf-8")
    try:
        converted = redact_manifest(text, sensitive_values)
    except ManifestError as e:
        error_exit(str(e), exit_code=ExitCode.VALIDATION_ERROR, path=str(manifest_file))

    success(converted)


__all__: list[str] = ["json_command"]
