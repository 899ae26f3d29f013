"""Shared fixtures for ibanMCP tests."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

import pytest

# Keep test runs from writing into ~/.ibanMCP/logs
os.environ.setdefault("IBANMCP_LOG_DIR", tempfile.mkdtemp(prefix="ibanmcp-logs-"))

DATA_DIR = Path(__file__).parent / "data"


def load_sample_ibans() -> list:
    """One known-good IBAN per supported country: {country, code, iban}."""
    with open(DATA_DIR / "iban.json", encoding="utf-8") as fh:
        return json.load(fh)["ibans"]


@pytest.fixture
def sample_ibans() -> list:
    return load_sample_ibans()


class FakeMCP:
    """Collects functions registered via ``@mcp.tool()``."""

    def __init__(self) -> None:
        self.tools: dict = {}

    def tool(self):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn
        return decorator


@pytest.fixture
def iban_tools() -> dict:
    from skills.iban import register_tools

    mcp = FakeMCP()
    register_tools(mcp)
    return mcp.tools
