"""Punto de entrada: python -m readiness_tool."""

from __future__ import annotations

from readiness_tool.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
