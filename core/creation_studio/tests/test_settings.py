"""
Tests for Settings and StudioConfig
"""

import logging

from config import logging_config
from config.settings import Settings
from core.creation_studio.config import StudioConfig
from core.creation_studio.models import TaskCategory


class TestSettings:

    def test_env_vars_are_read(self, monkeypatch):
        monkeypatch.setenv("MISTRAL_API_KEY", "env-mistral-key")
        monkeypatch.setenv("MAX_ATTEMPTS_PER_VENDOR", "4")

        settings = Settings(_env_file=None)

        assert settings.api_key_for("mistral") == "env-mistral-key"
        assert settings.max_attempts_per_vendor == 4

    def test_placeholder_keys_are_ignored(self):
        settings = Settings(_env_file=None, groq_api_key="your_groq_api_key_here", gemini_api_key="  ")

        assert settings.api_key_for("groq") == ""
        assert settings.api_key_for("gemini") == ""

    def test_configured_vendors(self, test_settings):
        assert test_settings.configured_vendors() == [
            "gemini", "groq", "deepseek", "mistral", "openrouter", "huggingface",
        ]

    def test_unknown_vendor(self, test_settings):
        assert test_settings.api_key_for("anthropic") == ""

    def test_print_config(self, test_settings, capsys):
        test_settings.print_config()

        out = capsys.readouterr().out
        assert "Configured vendors: gemini, groq, deepseek, mistral, openrouter, huggingface" in out
        assert "Attempts/vendor:    2" in out


class TestStudioConfig:

    def test_from_settings(self, test_settings):
        config = StudioConfig.from_settings(test_settings)

        assert config.max_attempts_per_vendor == test_settings.max_attempts_per_vendor
        assert config.retry_backoff_seconds == 0

    def test_stage_tasks(self):
        config = StudioConfig()

        assert config.task_for("architect") == TaskCategory.PLANNING
        assert config.task_for("writer") == TaskCategory.WRITING
        assert config.task_for("editor") == TaskCategory.EDITING
        assert config.task_for("unknown") == TaskCategory.QUICK_RESPONSE


class TestLogging:

    def test_setup_logging_writes_file(self, monkeypatch, tmp_path):
        root = logging.getLogger()
        handlers_before = list(root.handlers)
        level_before = root.level
        monkeypatch.setattr(logging_config, "_configured", False)
        log_file = tmp_path / "studio.log"

        try:
            logging_config.setup_logging("DEBUG", str(log_file))
            logging_config.get_logger("CreationStudio.Test").debug("hello file")
            for handler in root.handlers:
                handler.flush()

            assert "CreationStudio.Test - DEBUG - hello file" in log_file.read_text(encoding="utf-8")
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            for handler in root.handlers[:]:
                if handler not in handlers_before:
                    root.removeHandler(handler)
                    handler.close()
            root.setLevel(level_before)
