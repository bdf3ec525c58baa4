"""
Logfire Configuration Module

Centralized logfire configuration and instrumentation setup for localized-settings.

Usage:
    from localized_settings.core.logfire_config import initialize_logfire

    results = initialize_logfire(app)  # idempotent; safe to call at startup
    # results: {"configured": bool, "instrumentation": {...}}
"""

import logging
from typing import Any, Dict, Optional

import logfire
from fastapi import FastAPI

from localized_settings.core.config import settings
from localized_settings.core.logger import ROOT_LOGGER_NAME


class _LogfireState:
    """Internal state management for logfire configuration."""

    def __init__(self) -> None:
        self.configured = False
        self.instrumented = False
        self.instrument_results: Dict[str, bool] = {"sqlalchemy": False}

    def get_instrument_results(self) -> Dict[str, bool]:
        """Get a copy of the current instrumentation results."""
        return self.instrument_results.copy()


_state = _LogfireState()


def setup_logfire_handler() -> None:
    """
    Forward application log records to Logfire.

    Must run after logging.config.dictConfig(), otherwise the handler is
    dropped. Idempotent.
    """
    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if any(isinstance(h, logfire.LogfireLoggingHandler) for h in app_logger.handlers):
        return

    app_logger.addHandler(logfire.LogfireLoggingHandler())
    logging.getLogger(f"{ROOT_LOGGER_NAME}.logfire").info(
        "Logfire logging handler configured"
    )


def setup_logfire() -> bool:
    """
    Set up basic logfire configuration.

    Returns:
        bool: True if logfire was successfully configured, False otherwise
    """
    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.logfire")

    if not settings.logfire__enabled or _state.configured:
        return _state.configured

    try:
        config_kwargs: Dict[str, Any] = {
            "service_name": settings.logfire__service_name,
            "environment": settings.logfire__environment,
            "send_to_logfire": "if-token-present",
        }
        if settings.logfire__token:
            config_kwargs["token"] = settings.logfire__token.get_secret_value()

        logfire.configure(**config_kwargs)
        logger.info(
            "Logfire initialized for service: %s", settings.logfire__service_name
        )

        setup_logfire_handler()

        _state.configured = True
        return True

    except Exception as e:
        logger.error("Failed to initialize logfire: %s", e)
        return False


def instrument_logfire() -> Dict[str, bool]:
    """
    Set up logfire instrumentation for the settings database engine.

    Returns:
        dict: Dictionary with instrumentation results for each library
    """
    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.logfire")

    if not settings.logfire__enabled or _state.instrumented:
        return _state.get_instrument_results()

    if settings.logfire__instrument__sqlalchemy:
        try:
            from localized_settings.stores.database import engine

            logfire.instrument_sqlalchemy(engine=engine)
            logger.info("Logfire SQLAlchemy instrumentation enabled")
            _state.instrument_results["sqlalchemy"] = True
        except Exception as e:
            logger.warning("Failed to instrument SQLAlchemy with logfire: %s", e)

    _state.instrumented = True
    return _state.get_instrument_results()


def instrument_fastapi(app: FastAPI) -> bool:
    """
    Set up logfire instrumentation for FastAPI.

    Args:
        app: The FastAPI application instance

    Returns:
        bool: True if FastAPI was successfully instrumented, False otherwise
    """
    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.logfire")

    if not settings.logfire__enabled or not settings.logfire__instrument__fastapi:
        return False

    try:
        logfire.instrument_fastapi(app, capture_headers=True)
        logger.info("FastAPI instrumented with logfire")
        return True
    except Exception as e:
        logger.error("Failed to instrument FastAPI with logfire: %s", e)
        return False


def initialize_logfire(app: Optional[FastAPI] = None) -> Dict[str, Any]:
    """
    Complete logfire initialization including configuration and instrumentation.

    Args:
        app: Optional FastAPI application instance for instrumentation

    Returns:
        dict: Initialization results with status for each component
    """
    results: Dict[str, Any] = {
        "configured": False,
        "instrumentation": {"sqlalchemy": False, "fastapi": False},
    }

    results["configured"] = setup_logfire()

    if results["configured"]:
        results["instrumentation"].update(instrument_logfire())
        if app is not None:
            results["instrumentation"]["fastapi"] = instrument_fastapi(app)

    return results


def is_logfire_enabled() -> bool:
    """Check if logfire is enabled in settings."""
    return settings.logfire__enabled
