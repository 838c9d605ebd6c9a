import logging

from teamkeys import log


def test_setup_logging(monkeypatch):
    monkeypatch.setenv("TEAMKEYS_LOG_LEVELS", "teamkeys.frob:warning, .:error")

    root_level = logging.getLogger().level

    try:
        logger = log.setup_logging()

        assert logger is not None
        assert logging.getLogger("teamkeys.frob").level == logging.WARNING
        assert logging.getLogger().level == logging.ERROR
    finally:
        logging.getLogger().setLevel(root_level)


def test_setup_logging_quiets_http_loggers(monkeypatch):
    monkeypatch.delenv("TEAMKEYS_LOG_LEVELS", raising=False)

    log.setup_logging()

    assert logging.getLogger("urllib3").level == logging.WARNING


def test_enable_debug():
    log.enable_debug()

    assert logging.getLogger("urllib3").level == logging.DEBUG
    assert logging.getLogger("requests_oauthlib").level == logging.DEBUG
