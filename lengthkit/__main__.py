"""Entry point for ``python -m lengthkit``."""

from lengthkit.cli import main

raise SystemExit(main())
