"""Entry point for ``python -m fx_ptax``."""

from __future__ import annotations

import sys

from fx_ptax.scripts.ptax_rates import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())
