import logging
import sys

# Libraries under the extraction and analysis stacks that flood DEBUG output.
_NOISY_LOGGERS = ("pdfminer", "PIL", "httpx", "httpcore", "openai", "multipart")


class Log:
    """Centralized logging for the analyzer service.

    Messages carry the thread name so per-artifact extraction workers can be
    told apart in batch uploads.
    """

    _logger: logging.Logger = logging.getLogger("engagement_analyzer")

    @classmethod
    def configure(cls, log_level: str, *, quiet_libraries: bool = True) -> None:
        """Set the level and attach a stdout handler once.

        Third-party loggers are capped at WARNING unless ``quiet_libraries``
        is False.
        """
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(threadName)s %(message)s")
            )
            cls._logger.addHandler(handler)
            cls._logger.propagate = False
        if quiet_libraries:
            for name in _NOISY_LOGGERS:
                logging.getLogger(name).setLevel(logging.WARNING)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log at ERROR with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
