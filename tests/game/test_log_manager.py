"""
Unit tests for the LogManager.

Tests message buffering, level and category filtering, debug toggling
and saving logs to disk.
"""
import os

from src.game.log_manager import LogCategory, LogLevel, LogManager, LogMessage


class TestLogMessage:
    """Test message formatting."""

    def test_format_with_category(self):
        message = LogMessage(text="Loaded", category=LogCategory.LOADER)
        assert message.format() == "[LDR] Loaded"

    def test_format_without_category(self):
        message = LogMessage(text="Loaded", category=LogCategory.LOADER)
        assert message.format(include_category=False) == "Loaded"

    def test_format_with_timestamp(self):
        message = LogMessage(text="x", category=LogCategory.SYSTEM)
        formatted = message.format(include_timestamp=True)
        assert formatted.startswith("[")
        assert formatted.endswith("[SYS] x")


class TestLogManager:
    """Test buffering and filtering."""

    def test_convenience_methods(self):
        manager = LogManager()
        manager.system("s")
        manager.calculator("c")
        manager.loader("l")
        manager.warning("w")
        manager.error("e")

        categories = [msg.category for msg in manager.get_messages()]
        assert categories == [
            LogCategory.SYSTEM, LogCategory.CALCULATOR, LogCategory.LOADER,
            LogCategory.WARNING, LogCategory.ERROR,
        ]

    def test_debug_hidden_by_default(self):
        manager = LogManager()
        manager.debug("hidden")
        manager.calculator("shown")

        assert [msg.text for msg in manager.get_messages()] == ["shown"]
        assert len(manager.messages) == 2

    def test_toggle_debug(self):
        manager = LogManager()
        manager.debug("detail")
        manager.toggle_debug()
        assert manager.is_debug_enabled()
        assert [msg.text for msg in manager.get_messages()] == ["detail"]

        manager.toggle_debug()
        assert not manager.is_debug_enabled()
        assert manager.get_messages() == []

    def test_warning_level_filters_info(self):
        manager = LogManager(default_level=LogLevel.WARNING)
        manager.calculator("info")
        manager.warning("warn")

        assert [msg.text for msg in manager.get_messages()] == ["warn"]

    def test_explicit_categories(self):
        manager = LogManager()
        manager.system("a")
        manager.loader("b")

        assert [msg.text for msg in manager.get_messages(categories={LogCategory.LOADER})] == ["b"]

    def test_disabled_category(self):
        manager = LogManager()
        manager.disable_category(LogCategory.SYSTEM)
        manager.system("gone")

        assert manager.get_messages() == []
        manager.enable_category(LogCategory.SYSTEM)
        assert len(manager.get_messages()) == 1

    def test_count_returns_most_recent(self):
        manager = LogManager()
        for i in range(5):
            manager.system(str(i))

        assert [msg.text for msg in manager.get_messages(count=2)] == ["3", "4"]

    def test_buffer_is_bounded(self):
        manager = LogManager(max_messages=3)
        for i in range(10):
            manager.system(str(i))

        assert [msg.text for msg in manager.messages] == ["7", "8", "9"]

    def test_format_messages(self):
        manager = LogManager()
        manager.calculator("done")

        assert manager.format_messages() == ["[CLC] done"]

    def test_clear(self):
        manager = LogManager()
        manager.system("x")
        manager.clear()

        assert len(manager.messages) == 0


class TestSaveLog:
    """Test writing logs to disk."""

    def test_save_writes_all_messages(self, tmp_path):
        manager = LogManager()
        manager.debug("hidden detail")
        manager.calculator("result")

        filepath = manager.save_log_to_file(str(tmp_path / "logs"))

        assert filepath is not None
        assert os.path.exists(filepath)
        with open(filepath, encoding="utf-8") as f:
            content = f.read()
        assert "[DEBUG] hidden detail" in content
        assert "[CALCULATOR] result" in content
        assert manager.get_messages()[-1].text.startswith("Log saved to")

    def test_save_empty_log(self, tmp_path):
        manager = LogManager()
        filepath = manager.save_log_to_file(str(tmp_path))

        with open(filepath, encoding="utf-8") as f:
            assert "No messages to save." in f.read()

    def test_save_failure_logged(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("file")
        manager = LogManager()

        assert manager.save_log_to_file(str(blocker)) is None
        assert manager.get_messages()[-1].category == LogCategory.ERROR
