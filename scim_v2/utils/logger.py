import logging
from collections.abc import MutableMapping
from typing import Any

from scim_v2.configs.app_configs import LOG_LEVEL

logging.addLevelName(logging.INFO + 5, "NOTICE")


class ScimLoggingAdapter(logging.LoggerAdapter):
    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        # Prefix with whatever context the adapter was created with,
        # e.g. setup_logger(extra={"resource": "Group"})
        if self.extra:
            context = " ".join(f"{key}={value}" for key, value in self.extra.items())
            msg = f"[{context}] {msg}"
        return msg, kwargs

    def notice(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        # Stands out above INFO without being a warning
        self.log(logging.getLevelName("NOTICE"), msg, *args, **kwargs)


def get_log_level_from_str(log_level_str: str = LOG_LEVEL) -> int:
    log_level_dict = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "NOTICE": logging.getLevelName("NOTICE"),
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }

    return log_level_dict.get(log_level_str.upper(), logging.INFO)


def get_standard_formatter() -> logging.Formatter:
    return logging.Formatter(
        "%(asctime)s %(filename)30s %(lineno)4s %(levelname)-8s: %(message)s",
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )


def setup_logger(
    name: str = __name__,
    log_level: int = get_log_level_from_str(),
    extra: MutableMapping[str, Any] | None = None,
) -> ScimLoggingAdapter:
    logger = logging.getLogger(name)

    # If the logger already has handlers, assume it was already configured
    if logger.handlers:
        return ScimLoggingAdapter(logger, extra=extra or {})

    logger.setLevel(log_level)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(get_standard_formatter())
    logger.addHandler(handler)

    return ScimLoggingAdapter(logger, extra=extra or {})
