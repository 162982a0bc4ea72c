"""Command-line interface for tfhelm.

Command Groups:
    tfhelm values: Chart values merging (render)
    tfhelm manifest: Rendered manifest conversion (json)

Example:
    $ tfhelm --help
    $ tfhelm values render -f values.yaml --set-sensitive db.password=s3cr3t

Exit Codes:
    0: Success
    1: General error
    2: Usage error (invalid arguments)
    3: File not found
    5: Validation error (values, overrides, manifests)
"""

from __future__ import annotations

from tfhelm_core.cli.main import cli, main
from tfhelm_core.cli.utils import ExitCode, error, error_exit, success

__all__: list[str] = [
    "ExitCode",
    "cli",
    "error",
    "error_exit",
    "main",
    "success",
]
