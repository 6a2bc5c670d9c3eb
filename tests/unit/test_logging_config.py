"""
Unit tests for logging setup.
"""

import logging

from czech_keywords.logging_config import setup_logging


class TestSetupLogging:
    """Test handler configuration and log retention"""

    def test_console_only(self):
        assert setup_logging(log_file=None, console_level=logging.INFO) is None

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.INFO

    def test_file_handler(self, tmp_path):
        session_log = setup_logging(log_file=str(tmp_path / "logs" / "keywords.log"))

        assert session_log is not None
        assert session_log.parent == tmp_path / "logs"
        assert session_log.name.startswith("keywords_")
        assert len(logging.getLogger().handlers) == 2

        logging.getLogger("czech_keywords.test").debug("detail for the file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "detail for the file" in session_log.read_text(encoding="utf-8")

    def test_old_logs_cleaned_up(self, tmp_path):
        for i in range(6):
            (tmp_path / f"keywords_2020010{i}_000000.log").write_text("old", encoding="utf-8")

        setup_logging(log_file=str(tmp_path / "keywords.log"))

        remaining = sorted(p.name for p in tmp_path.glob("keywords_2020*.log"))
        assert remaining == [
            "keywords_20200102_000000.log",
            "keywords_20200103_000000.log",
            "keywords_20200104_000000.log",
            "keywords_20200105_000000.log",
        ]
