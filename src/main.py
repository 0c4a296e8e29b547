"""Entry point for SNEK."""

from __future__ import annotations

from snek.game import main

if __name__ == "__main__":
    main()
