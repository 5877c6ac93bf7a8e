"""Markdown job summary builder."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

SUMMARY_FILE_ENV = "GITHUB_STEP_SUMMARY"


class SummaryWriter:
    """Accumulates markdown and appends it to the step summary file."""

    def __init__(self, path: Optional[Path] = None) -> None:
        if path is None:
            configured = os.getenv(SUMMARY_FILE_ENV)
            path = Path(configured) if configured else None
        self.path = path
        self._lines: List[str] = []

    @property
    def available(self) -> bool:
        return self.path is not None

    def add_heading(self, text: str, level: int = 1) -> "SummaryWriter":
        level = min(max(level, 1), 6)
        self._lines.append(f"{'#' * level} {text}")
        self._lines.append("")
        return self

    def add_list(self, items: Iterable[str]) -> "SummaryWriter":
        self._lines.extend(f"- {item}" for item in items)
        self._lines.append("")
        return self

    def stringify(self) -> str:
        return "\n".join(self._lines)

    def write(self) -> str:
        """Append the buffered markdown to the summary file and clear the buffer.

        Raises:
            OSError: If the summary file cannot be written.
        """
        content = self.stringify()
        self._lines = []
        if self.path is None:
            logger.info("%s not set; summary follows\n%s", SUMMARY_FILE_ENV, content)
            return content
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(content + "\n")
        return content


__all__ = ["SUMMARY_FILE_ENV", "SummaryWriter"]
