import logging

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration


def init_sentry(dsn: str, environment: str = "local") -> bool:
    """Enable error reporting when a DSN is configured.

    Returns whether Sentry was initialised. Breadcrumbs are taken from
    INFO records, events only from ERROR ones, so the per-operation
    logs of the routers do not turn into Sentry issues.
    """
    if not dsn:
        return False
    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        integrations=[
            LoggingIntegration(level=logging.INFO,
                               event_level=logging.ERROR),
            FastApiIntegration(),
        ],
        traces_sample_rate=1.0,
        send_default_pii=False,
    )
    return True
