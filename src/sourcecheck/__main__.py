"""Allow ``python -m sourcecheck``."""

from sourcecheck.cli import main

raise SystemExit(main())
