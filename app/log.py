"""Console logging shared by every module of the app."""

from __future__ import annotations

import logging
import sys

from config import LOG_LEVEL

_ROOT_NAME = "sentence_practice"


def _configure(root: logging.Logger) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
    root.setLevel(LOG_LEVEL)


def get_logger(name: str) -> logging.Logger:
    """
    Return a child of the app logger, configuring the handler on first use.

    Streamlit re-executes scripts on every interaction, so configuration
    must be idempotent.
    """
    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        _configure(root)
    return root.getChild(name)
