"""Punto de entrada ``python -m step_tracker``."""

from __future__ import annotations

from step_tracker.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
