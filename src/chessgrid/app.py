"""Application entry point."""

from __future__ import annotations

import sys


def main(argv: list[str] | None = None) -> None:
    """Launch the Chessgrid application."""
    from chessgrid.ui.bootstrap import configure_logging, run_application
    from chessgrid.ui.settings import AppSettings

    args = sys.argv[1:] if argv is None else argv
    settings = AppSettings.from_args(args)
    configure_logging(settings.log_level)
    sys.exit(run_application(settings, [sys.argv[0], *args]))


if __name__ == "__main__":
    main()
