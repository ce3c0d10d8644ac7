import sys

from proofstore.cli import main

if __name__ == "__main__":  # pragma: no cover - manual execution path
    sys.exit(main())
