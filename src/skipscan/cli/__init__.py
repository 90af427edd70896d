"""skipscan CLI - find a pattern with the skip-table searchers.

Uses tyro for type-driven CLI generation from dataclasses.
"""

from __future__ import annotations

from typing import Annotated

import tyro

from skipscan.cli.commands.compare import Compare
from skipscan.cli.commands.find import Find

# Type aliases for subcommand annotations
_Find = Annotated[Find, tyro.conf.subcommand("find")]
_Compare = Annotated[Compare, tyro.conf.subcommand("compare")]

Command = _Find | _Compare


def main(args: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    # configure structlog (respects SKIPSCAN_DEBUG env var)
    from skipscan.logging_config import configure_logging

    configure_logging()

    try:
        cmd = tyro.cli(
            Command,
            prog="skipscan",
            description="Enumerate pattern matches with skip-table searchers.",
            args=args,
        )
        return cmd.run()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        from skipscan import console

        console.error(str(e))
        return 1
