"""Action ``main`` step: ``python -m workflow_telemetry.main``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main(["start"]))
