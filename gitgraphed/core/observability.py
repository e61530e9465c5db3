import logging

import sentry_sdk

from gitgraphed.settings import APP_NAME
from gitgraphed.settings import APP_VERSION
from gitgraphed.settings import Settings


LOG_FORMAT = "%(asctime)s %(name)-12s %(levelname)-8s %(message)s"


def configure_logging(level: int | str) -> None:
    """Send log records to stderr and set the root logger level.

    Standard output is left alone; it carries the JSON document.
    """

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)


def init_sentry(app_settings: Settings) -> bool:
    """Initialize Sentry SDK when DSN is configured.

    Returns whether error reporting is active. Without an explicit
    release the installed program version is reported.
    """

    if not app_settings.sentry_dsn:
        return False

    sentry_sdk.init(
        dsn=app_settings.sentry_dsn,
        environment=app_settings.environment,
        release=app_settings.release or f"{APP_NAME}@{APP_VERSION}",
        traces_sample_rate=app_settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )
    sentry_sdk.set_tag("component", "scraper")
    return True
