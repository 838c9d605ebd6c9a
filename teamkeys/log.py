import logging

import aws_lambda_powertools

from . import cfg

HTTP_LOGGERS = ("requests_oauthlib", "urllib3")


def setup_logging() -> aws_lambda_powertools.Logger:
    log_levels = cfg.getdict("TEAMKEYS_LOG_LEVELS")
    log_levels.setdefault(".", "info")

    for log_name in HTTP_LOGGERS:
        log_levels.setdefault(log_name, "warning")

    root_log = logging.getLogger()
    log = aws_lambda_powertools.Logger(service="teamkeys")

    for log_name, level_name in log_levels.items():
        log_level = getattr(logging, level_name.upper())

        if log_name == ".":
            log.debug("setting root logger level", extra=dict(level=log_level))

            root_log.setLevel(log_level)

            continue

        log.debug("setting logger", extra=dict(log_name=log_name, level=log_level))

        logging.getLogger(log_name).setLevel(log_level)

    return log


def enable_debug() -> None:
    """turn on debug output for teamkeys and the http stack under it"""

    log.setLevel(logging.DEBUG)

    for log_name in HTTP_LOGGERS:
        logging.getLogger(log_name).setLevel(logging.DEBUG)


log = setup_logging()
