"""Sentry error tracking for complexity-engine."""
import os
from typing import Any

import sentry_sdk

from complexity_engine.constants import EnvVars
from complexity_engine.core.logging import get_logger


def init_sentry(service_name: str = "complexity-engine") -> bool:
    """Initialize Sentry when a DSN is configured.

    Args:
        service_name: Service tag attached to every event

    Returns:
        True if Sentry was initialized, False when SENTRY_DSN is unset
    """
    dsn = os.getenv(EnvVars.SENTRY_DSN)
    if not dsn:
        return False

    environment = os.getenv(EnvVars.SENTRY_ENVIRONMENT, "development")
    is_development = environment == "development"

    def _tag_event(event: Any, hint: Any) -> Any:
        event.setdefault("tags", {})
        event["tags"]["service"] = service_name
        event["tags"]["component"] = "complexity-engine"
        return event

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        traces_sample_rate=1.0 if is_development else 0.1,
        attach_stacktrace=True,
        max_breadcrumbs=50,
        before_send=_tag_event,
    )
    sentry_sdk.set_tag("service", service_name)

    get_logger("sentry").info("sentry_initialized", service=service_name, environment=environment)
    return True
