"""CLI entry point for printing the BCA price table."""

from __future__ import annotations

from kurs_pricing.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    raise SystemExit(main())
