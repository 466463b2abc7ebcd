"""共享 fixture"""

from __future__ import annotations

import pytest

from tests.fakes import COMMIT, FakeExecutor, ok


@pytest.fixture()
def repo_rules() -> dict[str, object]:
    """带 tag、工作区干净、go1.21 的默认场景"""
    return {
        "version": ok("go version go1.21.3 linux/amd64\n"),
        "rev-parse": ok(COMMIT + "\n"),
        "status": ok(""),
        "describe": ok("v1.2.0-3-gabc12300000000\n"),
    }


@pytest.fixture()
def executor(repo_rules) -> FakeExecutor:
    return FakeExecutor(repo_rules)
