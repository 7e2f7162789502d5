"""Shared fixtures for contextpack tests."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

REFUND_DOC = """# Refund Policy

Refunds are issued to the original payment method within 30 days.
Contact billing support to request refunds for annual plans.
"""

LOGIN_DOC = """# Login Troubleshooting

If you cannot sign in, reset your password and clear browser cookies.
Accounts lock after five failed attempts.
"""


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def corpus() -> list[tuple[str, str]]:
    return [("billing/refunds.md", REFUND_DOC), ("auth/login.md", LOGIN_DOC)]


@pytest.fixture
def docs_zip(tmp_path: Path) -> Path:
    path = tmp_path / "docs.zip"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("billing/refunds.md", REFUND_DOC)
        zf.writestr("auth/LOGIN.MD", LOGIN_DOC)
        zf.writestr("images/logo.png", b"\x89PNG\r\n")
        zf.writestr("notes.txt", "refunds mentioned in a text file")
    return path


@pytest.fixture
def docs_folder(tmp_path: Path) -> Path:
    root = tmp_path / "docs"
    (root / "billing").mkdir(parents=True)
    (root / "auth").mkdir()
    (root / ".git").mkdir()
    (root / "billing" / "refunds.md").write_text(REFUND_DOC)
    (root / "auth" / "login.md").write_text(LOGIN_DOC)
    (root / ".git" / "HEAD.md").write_text("# Hidden\n")
    (root / "notes.txt").write_text("plain notes")
    return root
