# -*- coding: utf-8 -*-

"""Logging module for caseless

* package loggers forwarding ``tag_*`` keywords to sentry
* sentry error reporting

"""

import os
import logging

from . import constants
from . import exception

SENTRY_SDK_AVAILABLE = False
if os.environ.get("DISABLE_SENTRY") == "True":
    pass
else:
    try:
        import sentry_sdk
        import sentry_sdk.utils
        from sentry_sdk.integrations.logging import LoggingIntegration

        SENTRY_SDK_AVAILABLE = True
    except ImportError:
        pass


def getLogger(name):
    return SentryLogger(logging.getLogger(name), {})


def set_tag(name, value):
    if SENTRY_SDK_AVAILABLE:
        sentry_sdk.set_tag(name, value)


def init_sentry():
    """Initialises sentry once a DSN is configured. Returns whether sentry is active."""
    if not SENTRY_SDK_AVAILABLE or not constants.SENTRY_DSN:
        return False
    sentry_logging = LoggingIntegration(
        level=logging.INFO,  # Capture info and above as breadcrumbs
        event_level=logging.ERROR,  # Send errors as events
    )
    sentry_sdk.init(
        dsn=constants.SENTRY_DSN,
        integrations=[sentry_logging],
        environment=constants.SENTRY_ENVIRONMENT,
        before_send=before_sentry_send,
    )
    sentry_sdk.utils.MAX_STRING_LENGTH = 5000
    return True


def before_sentry_send(event, hint):
    # see https://docs.sentry.io/platforms/python/configuration/filtering/
    if "exc_info" in hint:
        exc_type, exc_value, tb = hint["exc_info"]
        if isinstance(exc_value, exception.UnsupportedKeyKind):
            return
    return event


class SentryLogger(logging.LoggerAdapter):
    """Wraps any logger and sends ``tag_`` keywords to sentry. Example:

    logger.warning("rejected key", tag_key_kind="tuple")
    leading to sentry tag: key_kind="tuple"
    """

    def process(self, msg, kwargs):
        for key in [key for key in kwargs if key.startswith("tag_")]:
            set_tag(key[len("tag_"):], kwargs.pop(key))
        return super().process(msg, kwargs)
