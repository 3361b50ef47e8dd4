"""Test configuration for pytest.

:created: 2026-10-18
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


def pytest_assertrepr_compare(
    config: Any, op: str, left: str, right: str
) -> list[str] | None:
    """See full error diffs"""
    del config
    if op in ("==", "!="):
        return [f"{left} {op} {right}"]
    return None


TEST_RESOURCES = Path(__file__).parent / "resources"
