"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from tests.fakes import FakePageSource, make_records


@pytest.fixture(autouse=True)
def no_api_key_env(monkeypatch):
    monkeypatch.delenv("GIPHY_API_KEY", raising=False)


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def source() -> FakePageSource:
    fake = FakePageSource()
    fake.pages[0] = make_records(0)
    fake.pages[1] = make_records(1)
    return fake


@pytest.fixture
def controller(source):
    from gifload.managers import PaginationController

    ctrl = PaginationController(source)
    yield ctrl
    ctrl.close()
