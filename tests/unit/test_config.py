"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from trasher.config import QueueSettings, Settings, SiteSettings


def test_comment_url():
    site = SiteSettings(base_url="https://example.com/")

    assert site.comment_url(12, 34) == "https://example.com/?p=12#comment-34"


def test_queue_limit_must_be_positive():
    with pytest.raises(ValidationError):
        QueueSettings(limit=0)


def test_nested_settings_from_environment(monkeypatch):
    monkeypatch.setenv("QUEUE__LIMIT", "20")
    monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/site")

    settings = Settings()

    assert settings.queue.limit == 20
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/site"
