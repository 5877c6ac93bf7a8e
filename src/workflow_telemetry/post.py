"""Action ``post`` step: ``python -m workflow_telemetry.post``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main(["stop"]))
