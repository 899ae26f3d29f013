"""
Centralized logging with IBAN masking.

Environment variables:
  IBANMCP_LOG_DIR    – Directory for the rotating log file (default: ~/.ibanMCP/logs)
  IBANMCP_LOG_LEVEL  – Console log level (default: INFO)
"""

from __future__ import annotations

import logging
import os
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Compact ("DE89370400440532013000") or grouped ("DE89 3704 0044 0532 0130 00")
_IBAN_PATTERN = re.compile(r"\b[A-Z]{2}\d{2}(?: ?[\dA-Z]{4}){2,7}(?: ?[\dA-Z]{1,3})?\b")

_DEFAULT_LOG_DIR = Path.home() / ".ibanMCP" / "logs"


class _MaskingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = mask_text(str(record.msg))
        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: (mask_text(v) if isinstance(v, str) else v) for k, v in record.args.items()}
            else:
                record.args = tuple((mask_text(a) if isinstance(a, str) else a) for a in record.args)
        return True


def mask_text(text: str) -> str:
    """Replace every IBAN-shaped token with its masked form (first 4 / last 4 kept)."""
    def _replace(m: re.Match) -> str:  # type: ignore[type-arg]
        compact = m.group(0).replace(" ", "")
        return compact[:4] + "*" * (len(compact) - 8) + compact[-4:]
    return _IBAN_PATTERN.sub(_replace, text)


def _log_dir() -> Path:
    configured = os.getenv("IBANMCP_LOG_DIR", "").strip()
    return Path(configured).expanduser() if configured else _DEFAULT_LOG_DIR


def setup_logger(name: str = "ibanMCP") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    level_name = os.getenv("IBANMCP_LOG_LEVEL", "INFO").strip().upper()
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(getattr(logging, level_name, logging.INFO))
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    console.addFilter(_MaskingFilter())
    logger.addHandler(console)

    log_dir = _log_dir()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_dir / "server.log", maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
    except OSError as exc:
        logger.warning("File logging disabled (%s): %s", log_dir, exc)
        return logger

    fh.setLevel(logging.DEBUG)
    fh.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d – %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    fh.addFilter(_MaskingFilter())
    logger.addHandler(fh)
    return logger


logger = setup_logger()
