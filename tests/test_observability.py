import logging
from unittest.mock import patch

import structlog

from affiliateos.logging import setup_logging
from affiliateos.sentry import setup_sentry
from affiliateos.settings import Settings
from affiliateos.settings.sentry import SentryConfig


def test_setup_logging_installs_stream_handler(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    setup_logging(Settings(ENVIRONMENT="PROD", DEBUG=True))

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    assert root.level == logging.DEBUG
    structlog.reset_defaults()


def test_sentry_disabled_without_dsn():
    with patch("affiliateos.sentry.sentry_sdk.init") as init:
        assert setup_sentry(SentryConfig(), environment="DEV", release="0.1.0") is False

    init.assert_not_called()


def test_sentry_initialised_with_dsn():
    config = SentryConfig(DSN="https://key@example.ingest.sentry.io/1", TRACES_SAMPLE_RATE=0.5)

    with patch("affiliateos.sentry.sentry_sdk.init") as init:
        assert setup_sentry(config, environment="PROD", release="0.1.0") is True

    init.assert_called_once_with(
        dsn="https://key@example.ingest.sentry.io/1",
        environment="PROD",
        release="0.1.0",
        send_default_pii=False,
        traces_sample_rate=0.5,
    )
