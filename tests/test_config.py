"""Configuration loads and points sessions at a server-side store."""

from pathlib import Path

from cachelib import FileSystemCache

import config


def test_config_imports_with_session_store():
    assert isinstance(config.SESSION_DIR, Path)
    assert isinstance(config.Config.INSTANCE_PATH, str)
    assert config.Config.SESSION_TYPE == "cachelib"
    assert isinstance(config.Config.SESSION_CACHELIB, FileSystemCache)


def test_app_uses_configured_session_store():
    from app import create_app

    app = create_app({"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:"})
    assert app.config["SESSION_TYPE"] == "cachelib"
    assert app.config["SESSION_CACHELIB"] is config.Config.SESSION_CACHELIB
