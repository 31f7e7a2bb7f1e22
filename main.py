# main.py
"""Start the vocab window against a server.

    python main.py --server http://localhost:8000
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import qasync
from PySide6.QtWidgets import QApplication

from config import DEFAULT_SERVER_URL
from controllers.app_controller import AppController
from repositories.remote_store import RemoteStore
from services.registry import Data
from ui.main_window import MainWindow
from utils import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Vocabulary manager")
    parser.add_argument("--server", default=DEFAULT_SERVER_URL, help="base URL of the vocab server")
    parser.add_argument("--debug", action="store_true", help="log every request")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.debug)
    logger.info("Using server %s", args.server)

    app = QApplication(sys.argv[:1])
    loop = qasync.QEventLoop(app)
    asyncio.set_event_loop(loop)

    closed = asyncio.Event()
    app.aboutToQuit.connect(closed.set)

    data = Data.create(RemoteStore(args.server))
    window = MainWindow()
    controller = AppController(window, data)
    window.show()

    with loop:
        start = loop.create_task(controller.start())
        loop.run_until_complete(closed.wait())
        if not start.done():
            start.cancel()
    return 0


if __name__ == "__main__":
    sys.exit(main())
