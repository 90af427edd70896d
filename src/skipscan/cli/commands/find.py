"""Find command - print every match of a pattern with its context."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Literal

import tyro
from rich.markup import escape

from skipscan import console
from skipscan.cli._common import load_text, run_search
from skipscan.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_CONTEXT,
    DEFAULT_ENCODING,
    DEMO_PATTERN,
)
from skipscan.logging_config import configure_logging
from skipscan.searchers import ALGORITHM_NAMES


@dataclass
class Find:
    """Find every occurrence of a pattern."""

    pattern: tyro.conf.Positional[str] = field(
        default=DEMO_PATTERN,
        metadata={"help": "Pattern to search for"},
    )
    text: str | None = field(
        default=None,
        metadata={"help": "Text to search (defaults to the demo sentence)"},
    )
    file: Path | None = field(
        default=None,
        metadata={"help": "Read the text to search from a UTF-8 file"},
    )
    algorithm: Annotated[
        Literal["boyer-moore", "horspool", "sunday", "all"],
        tyro.conf.arg(aliases=("-a",)),
    ] = field(
        default=DEFAULT_ALGORITHM,  # type: ignore[assignment]
        metadata={"help": "Search algorithm, or 'all' to run each in turn"},
    )
    encoding: Literal["utf-8", "utf-16-le", "utf-32-le", "text"] = field(
        default=DEFAULT_ENCODING,  # type: ignore[assignment]
        metadata={"help": "Symbol width the input is searched in"},
    )
    context: int = field(
        default=DEFAULT_CONTEXT,
        metadata={"help": "Trailing symbols shown per match (0 = rest)"},
    )
    output_format: Literal["none", "json"] = field(
        default="none",
        metadata={"help": "Output format (none=rich, json)"},
    )
    debug: bool = field(
        default=False,
        metadata={"help": "Enable debug logging"},
    )

    def run(self) -> int:
        """Execute the find command."""
        if self.debug:
            configure_logging(debug=True, force=True)
        else:
            configure_logging()

        text = load_text(self.text, self.file)
        algorithms = (
            list(ALGORITHM_NAMES)
            if self.algorithm == "all"
            else [self.algorithm]
        )

        reports = [
            run_search(
                algorithm,
                self.pattern,
                text,
                self.encoding,
                self.context,
            )
            for algorithm in algorithms
        ]

        if self.output_format == "json":
            console.json(
                json.dumps(
                    [r.model_dump() for r in reports],
                    ensure_ascii=False,
                    indent=2,
                )
            )
            return 0

        console.print(f"[-] {escape(text)}", soft_wrap=True)
        for index, report in enumerate(reports):
            for m in report.matches:
                console.print(
                    f"[{index}] _[bold yellow]{escape(m.match)}[/bold yellow]"
                    f"_{escape(m.following)} ({m.comparisons})",
                    soft_wrap=True,
                )
            if not report.matches:
                console.dim(f"[{index}] {report.algorithm}: no matches")
        return 0
