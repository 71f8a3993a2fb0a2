import functools
import logging
import time

import sentry_sdk

from models.cv_models import Analysis

logger = logging.getLogger(__name__)


def traced(operation: str):
    """
    Wrap a call with start/finish log events; failures are logged,
    reported to Sentry (a no-op unless initialised) and re-raised.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger.info(f"{operation} started")
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed_ms = (time.perf_counter() - started) * 1000
                logger.error(f"{operation} failed after {elapsed_ms:.1f} ms: {str(e)}", exc_info=True)
                sentry_sdk.capture_exception(e)
                raise
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(f"{operation} finished in {elapsed_ms:.1f} ms")
            return result
        return wrapper
    return decorator


def log_analysis(analysis: Analysis) -> None:
    logger.info(
        "CV analysis completed: coverage=%s specificity=%s impact=%s words=%s issues=%s recommendations=%s",
        analysis.scores.coverage,
        analysis.scores.specificity,
        analysis.scores.impact,
        analysis.metrics.words,
        len(analysis.issues),
        len(analysis.recommendations),
    )
