"""Allow ``python -m fmtgate``."""

from __future__ import annotations

from fmtgate.ui.cli import main


if __name__ == "__main__":
    main()
