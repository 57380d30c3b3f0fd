"""Run a scan with ``python -m sizetree``.

Scans the given directory (or prompts for one), then writes the size report
beside it or to stdout with ``--stdout``.
"""

from .cli import main


if __name__ == "__main__":
    main()
