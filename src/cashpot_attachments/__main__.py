"""
Entry point for running cashpot_attachments as a module.

This file enables:
- `python -m cashpot_attachments stats`
- `uv run python -m cashpot_attachments clear-all`
"""

from __future__ import annotations

from cashpot_attachments.cli.maintenance import main

if __name__ == "__main__":
    main()
