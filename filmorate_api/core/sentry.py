import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration


def init_sentry(dsn: str,
                environment: str = "dev",
                traces_sample_rate: float = 1.0) -> bool:
    """Enable error reporting; returns False when no DSN is configured."""
    if not dsn:
        return False
    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        integrations=[
            # 4xx paths log at ERROR; only unhandled exceptions become events
            LoggingIntegration(level=None, event_level=None),
            FastApiIntegration(),
        ],
        traces_sample_rate=traces_sample_rate,
        # user payloads carry emails
        send_default_pii=False,
    )
    return True
