"""Ask the worker binary to render SVG charts from a finished artifact."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def generate_charts(binary: Path, data_file: Path, *, timeout: float) -> bool:
    """Run ``<binary> --generate-svg <data_file>``; return whether it succeeded."""
    logger.info("Generating charts...")
    try:
        subprocess.run([str(binary), "--generate-svg", str(data_file)], check=True, timeout=timeout)
    except subprocess.CalledProcessError as exc:
        logger.warning("Chart generation exited with status %s", exc.returncode)
        return False
    except subprocess.TimeoutExpired:
        logger.warning("Chart generation did not finish within %ss", timeout)
        return False
    except OSError as exc:
        logger.warning("Chart generation could not start: %s", exc)
        return False
    return True


__all__ = ["generate_charts"]
