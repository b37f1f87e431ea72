"""Console entrypoint for the GUI (ic-gui DATASET)."""

from __future__ import annotations

import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """Launch the GUI application."""
    args = list(sys.argv[1:] if argv is None else argv)

    # Configure logging before anything else
    from ic_common.api import configure_logging

    configure_logging()

    if len(args) != 1:
        print("usage: ic-gui DATASET", file=sys.stderr)
        return 2

    # Import Qt after logging is configured
    from PySide6.QtWidgets import QApplication, QMessageBox

    from ic_common.errors import ICError
    from ic_gui.app import create_app
    from ic_gui.resources.theme import apply_theme

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Inventory Console")
    app.setOrganizationName("ic")

    apply_theme(app)

    try:
        window = create_app(Path(args[0]))
    except ICError as exc:
        QMessageBox.critical(None, "Inventory Console", str(exc))
        return 1
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
