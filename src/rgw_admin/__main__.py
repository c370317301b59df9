"""Allow ``python -m rgw_admin`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m rgw_admin`` behaves identically to the ``radosgw-admin``
console script.
"""

from __future__ import annotations

from rgw_admin.cli.app import cli

if __name__ == "__main__":
    cli()
