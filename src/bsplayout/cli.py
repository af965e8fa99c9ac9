"""Command line entry of bsplayout: sets up logging, applies the startup flags and serves river"""

import argparse
import logging
import os
import signal
import sys
from typing import Optional, Sequence

from . import __version__
from .commands import add_command_arguments, apply_command, parse_command
from .config import LayoutConfig
from .errors import ConfigError
from .river import LayoutSession, run

logger = logging.getLogger(__name__)

LOG_FORMAT = (
    "%(asctime)s [%(name)s] [%(threadName)-12.12s] [%(levelname)-5.5s]  %(message)s"
)


def setup_logging():
    """Configure the root logger

    ``BSPLAYOUT_LOGGING_PATH`` adds a log file, ``DEBUG_BSPLAYOUT`` enables debug
    output, set it to a comma separated list of logger names to limit the debug
    output to them, or ``*`` for everything.
    """
    logFormatter = logging.Formatter(LOG_FORMAT)
    handlers = []
    consoleHandler = logging.StreamHandler()
    consoleHandler.setFormatter(logFormatter)
    handlers.append(consoleHandler)
    logging_path = os.getenv("BSPLAYOUT_LOGGING_PATH")
    if logging_path:
        logging_dir = os.path.dirname(logging_path)
        if logging_dir and not os.path.exists(logging_dir):
            os.makedirs(logging_dir, exist_ok=True)
        fileHandler = logging.FileHandler(logging_path, mode="w+", encoding="utf-8")
        fileHandler.setFormatter(logFormatter)
        handlers.append(fileHandler)

    rootLogger = logging.getLogger()
    for handler in handlers:
        rootLogger.addHandler(handler)

    debugging = os.environ.get("DEBUG_BSPLAYOUT")
    if debugging:
        rootLogger.setLevel(logging.DEBUG)
        if debugging != "*":
            loggers = set(debugging.split(","))

            def f(record: logging.LogRecord) -> bool:
                return (
                    any(record.name.startswith(logger) for logger in loggers)
                    or record.levelno >= logging.INFO
                )

            for handler in handlers:
                handler.addFilter(f)
    else:
        rootLogger.setLevel(logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for the startup flags, they are the same as the layout commands"""
    parser = argparse.ArgumentParser(
        prog="bsplayout",
        description="Layout generator for the river Wayland compositor. Creates a grid "
        "like Binary Space Partitioned layout where every window is made as equal in "
        "size as possible while still occupying all available space.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    add_command_arguments(parser)
    return parser


def load_config(argv: Optional[Sequence[str]] = None) -> LayoutConfig:
    """Build the startup configuration from the defaults and the command line flags"""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    config = LayoutConfig()
    try:
        apply_command(config, parse_command(argv, parser))
    except ConfigError as err:
        parser.error(str(err))
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the layout generator"""
    config = load_config(argv)
    setup_logging()
    # support for Ctrl+C in console
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    logger.info("starting bsplayout %s with %s", __version__, config)
    try:
        run(LayoutSession(config))
    except RuntimeError as err:
        logger.error("%s", err)
        return 1
    return 0
