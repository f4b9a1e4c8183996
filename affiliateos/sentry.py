import sentry_sdk
import structlog

from affiliateos.settings.sentry import SentryConfig

logger = structlog.get_logger(__name__)


def setup_sentry(config: SentryConfig, environment: str, release: str) -> bool:
    """Initialise Sentry when a DSN is configured. Returns whether it was enabled."""
    if not config.DSN:
        logger.debug("Sentry DSN not configured, error reporting disabled")
        return False

    sentry_sdk.init(
        dsn=config.DSN,
        environment=environment,
        release=release,
        # Request headers and IP addresses are only attached when opted in.
        send_default_pii=config.SEND_DEFAULT_PII,
        traces_sample_rate=config.TRACES_SAMPLE_RATE,
    )
    logger.debug("Sentry initialised", environment=environment)
    return True
