"""Allow ``python -m numcat`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m numcat`` behaves identically to the ``numcat`` console
script.
"""

from __future__ import annotations

from numcat.cli.app import cli

if __name__ == "__main__":
    cli()
