#!/usr/bin/env python3
"""
Repo Cleaner - GTK4 interface for reviewing and deleting GitHub repositories
Minimal entry point - classes are in separate modules.
"""

import logging
import signal
import sys

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("RepoCleaner.UI")


def main():
    """Entry point"""
    from repocleaner.gui.application.repo_cleaner_app import RepoCleanerApp

    logger.info("Repo Cleaner starting...")

    def signal_handler(sig, frame):
        logger.info("Shutting down UI...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    app = RepoCleanerApp()
    return app.run(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
