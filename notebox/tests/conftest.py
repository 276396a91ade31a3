from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from notebox.app import create_app
from notebox.shared.config import AppConfig, DatabaseConfig

TEST_SECRET = "integration-secret-key-0123456789-abcdefghij"


@pytest.fixture()
def app_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AppConfig:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "app.log"))
    return AppConfig(
        JWT_SECRET=TEST_SECRET,
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'notebox.db'}"),
    )


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    app = create_app(app_config)
    yield app
    app.extensions["notebox.container"].engine.dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
