"""Compare command - run every algorithm and check that they agree."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

import tyro
from rich.table import Table

from skipscan import console
from skipscan.cli._common import load_text, run_search
from skipscan.config import DEFAULT_ENCODING, DEMO_PATTERN
from skipscan.logging_config import configure_logging, get_logger
from skipscan.models import ComparisonSummary, SearchReport
from skipscan.searchers import ALGORITHM_NAMES

logger = get_logger(__name__)


@dataclass
class Compare:
    """Run all algorithms on the same input and compare their work."""

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
    encoding: Literal["utf-8", "utf-16-le", "utf-32-le", "text"] = field(
        default=DEFAULT_ENCODING,  # type: ignore[assignment]
        metadata={"help": "Symbol width the input is searched in"},
    )
    repeat: int = field(
        default=1,
        metadata={"help": "Repeat the input N times before searching"},
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
        """Execute the compare command."""
        if self.debug:
            configure_logging(debug=True, force=True)
        else:
            configure_logging()
        if self.repeat < 1:
            console.error("--repeat must be at least 1")
            return 1

        text = load_text(self.text, self.file) * self.repeat
        reports = [
            run_search(algorithm, self.pattern, text, self.encoding, 1)
            for algorithm in ALGORITHM_NAMES
        ]
        summary = ComparisonSummary(
            pattern=self.pattern,
            encoding=self.encoding,
            buffer_length=reports[0].buffer_length,
            agree=_agree(reports),
            reports=reports,
        )
        if not summary.agree:
            logger.warning(
                "algorithms disagree",
                offsets={r.algorithm: r.offsets for r in reports},
            )

        if self.output_format == "json":
            console.json(summary.model_dump_json(indent=2))
        else:
            self._print_summary(summary)

        return 0 if summary.agree else 1

    def _print_summary(self, summary: ComparisonSummary) -> None:
        console.header(
            f"{summary.pattern!r} in {summary.buffer_length} symbols"
        )
        table = Table(show_header=True, header_style="bold")
        table.add_column("algorithm")
        table.add_column("matches", justify="right")
        table.add_column("comparisons", justify="right")
        table.add_column("time (ms)", justify="right")
        for r in summary.reports:
            table.add_row(
                r.algorithm,
                str(len(r.matches)),
                str(r.comparisons),
                f"{r.elapsed_ms or 0.0:.3f}",
            )
        console.print(table)

        if summary.agree:
            console.success("all algorithms agree")
        else:
            console.error("algorithms returned different offsets")


def _agree(reports: list[SearchReport]) -> bool:
    first = reports[0].offsets
    return all(r.offsets == first for r in reports[1:])
