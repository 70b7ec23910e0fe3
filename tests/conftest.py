from __future__ import annotations

import pytest

from batch_maker.core import config


@pytest.fixture
def workflow_db(tmp_path, monkeypatch: pytest.MonkeyPatch):
    # Point persistence at a throwaway sqlite file
    path = tmp_path / "workflows.sqlite3"
    monkeypatch.setattr(config, "WORKFLOW_DB", path)
    return path
