"""Tests for prompt file logging."""

from pantry_chef.llm import prompt_logger


def test_disabled_by_default(tmp_path, monkeypatch):
    monkeypatch.setattr(prompt_logger, "LOG_DIR", tmp_path / "prompt_logs")
    path = prompt_logger.log_prompt(model="m", system_prompt="s", user_prompt="u", response="[]")
    assert path is None
    assert not (tmp_path / "prompt_logs").exists()


def test_writes_markdown_when_enabled(tmp_path, monkeypatch):
    monkeypatch.setattr(prompt_logger, "LOG_DIR", tmp_path / "prompt_logs")
    prompt_logger.enable_prompt_logging(True)

    first = prompt_logger.log_prompt(model="m", system_prompt="be a chef", user_prompt="carrots", response="[]")
    second = prompt_logger.log_prompt(model="m", system_prompt="s", user_prompt="u", error="HTTP 429")

    assert first.name == "01_generate_recipes.md"
    assert second.name == "02_generate_recipes.md"
    text = first.read_text(encoding="utf-8")
    assert "be a chef" in text
    assert "carrots" in text
    assert "**ERROR:** HTTP 429" in second.read_text(encoding="utf-8")


def test_env_flag_enables_logging(tmp_path, monkeypatch):
    from pantry_chef.config import get_core_settings

    monkeypatch.setattr(prompt_logger, "LOG_DIR", tmp_path / "prompt_logs")
    monkeypatch.setenv("PANTRY_LOG_PROMPTS", "1")
    get_core_settings.cache_clear()

    assert prompt_logger.is_prompt_logging_enabled()
    assert prompt_logger.get_session_log_dir().exists()
