"""Tests for the command-line component self-check."""

import logging

from career_companion import main
from career_companion.ai_processing.llm_manager import LLMManager
from career_companion.config.store import DocumentStore

from conftest import FakeProvider


async def test_self_check_reports_store_stats(tmp_path, monkeypatch, gemini_config, caplog) -> None:
    store = DocumentStore(str(tmp_path / "check.db"))
    monkeypatch.setattr(main, "open_store", lambda: store)
    monkeypatch.setattr(
        main, "get_llm_manager", lambda: LLMManager(config=gemini_config, provider=FakeProvider())
    )

    with caplog.at_level(logging.INFO, logger="career_companion"):
        assert await main.check_system_components(ping_provider=False) is True

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("  job-applications:") for message in messages)
    assert "job-applications" in store.get_stats()
