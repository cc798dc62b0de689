import logging

from app.logging.logger import Log


class TestLogConfigure:
    def test_attaches_single_handler(self) -> None:
        Log.configure("info")
        Log.configure("debug")
        logger = logging.getLogger("engagement_analyzer")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_quiets_library_loggers(self) -> None:
        logging.getLogger("pdfminer").setLevel(logging.DEBUG)
        Log.configure("debug")
        assert logging.getLogger("pdfminer").level == logging.WARNING

    def test_can_leave_library_loggers_alone(self) -> None:
        logging.getLogger("pdfminer").setLevel(logging.DEBUG)
        Log.configure("debug", quiet_libraries=False)
        assert logging.getLogger("pdfminer").level == logging.DEBUG

    def test_threadname_in_format(self) -> None:
        Log.configure("info")
        handler = logging.getLogger("engagement_analyzer").handlers[0]
        assert handler.formatter is not None
        assert "%(threadName)s" in handler.formatter._fmt  # type: ignore[union-attr]
