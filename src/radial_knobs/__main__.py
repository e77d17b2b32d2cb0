"""Module entry point allowing ``python -m radial_knobs``."""

from __future__ import annotations

from .app import main

if __name__ == "__main__":  # pragma: no cover
    main()
