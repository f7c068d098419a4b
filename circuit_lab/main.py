"""
Circuit Lab entry point.

Usage::

    python main.py
    python main.py --settings my-settings.json --debug
"""

import argparse
import logging
import sys

from models.settings import EditorSettings

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog="circuit-lab", description="Interactive DC circuit sandbox")
    parser.add_argument("--settings", metavar="PATH", help="editor settings JSON (default: ~/.circuit-lab/settings.json)")
    parser.add_argument("--keybindings", metavar="PATH", help="keybindings JSON (default: ~/.circuit-lab/keybindings.json)")
    parser.add_argument("--debug", action="store_true", help="log mutations and solves")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Qt imports stay here so --help works without a display
    from GUI.keybindings import KeybindingsRegistry
    from GUI.main_window import MainWindow
    from PyQt6.QtWidgets import QApplication

    settings = EditorSettings.load(args.settings)
    keybindings = KeybindingsRegistry(args.keybindings)

    app = QApplication(sys.argv[:1])
    window = MainWindow(settings=settings, keybindings=keybindings)
    window.show()
    logger.info("Circuit Lab started")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
