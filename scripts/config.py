#!/usr/bin/env python3
"""Shared paths and logging setup for the sitedna scripts."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parent.parent
ENV_FILE = ROOT_DIR / ".env"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_data_dir() -> Path:
    """Data directory; SITEDNA_DATA_DIR is read on every call."""
    return Path(os.getenv("SITEDNA_DATA_DIR", str(ROOT_DIR / "data")))


def get_site_config_path() -> Path:
    return Path(os.getenv("SITEDNA_SITE_CONFIG", str(get_data_dir() / "site_config.json")))


def get_design_output_path() -> Path:
    return get_data_dir() / "design.json"


def setup_logging(name: str) -> logging.Logger:
    """Return a named logger with a single stream handler attached."""
    logger = logging.getLogger(name)

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
