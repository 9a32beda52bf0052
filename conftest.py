import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture
def storage_dir(tmp_path, monkeypatch):
    """Point uploads at an empty, existing directory."""
    from audiodrop.config import settings

    d = tmp_path / "audio"
    d.mkdir()
    monkeypatch.setattr(settings, "storage_dir", d)
    monkeypatch.setattr(settings, "storage_create_dir", False)
    return d


@pytest.fixture
def client(storage_dir):
    from fastapi.testclient import TestClient

    from audiodrop.main import app
    from audiodrop.utils.service_metrics import metrics

    metrics.reset()
    with TestClient(app) as c:
        yield c
