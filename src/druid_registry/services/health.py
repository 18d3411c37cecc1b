"""Broker reachability check.

A single blocking GET against the broker base URL, bypassing proxy
settings from the environment. Any HTTP response counts as reachable; every
failure is reported as unreachable and never raised.
"""

import time

import httpx

from druid_registry.observability import (
    get_logger,
    log_external_call_end,
    log_external_call_start,
)

logger = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


def is_broker_reachable(
    base_url: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> bool:
    """Probe a broker once, without retries.

    Args:
        base_url: Broker base URL, e.g. ``http://localhost:8082/``
        timeout: Connect/read timeout in seconds

    Returns:
        True if the broker answered with any HTTP response
    """
    log_external_call_start(logger, "druid-broker", "status")
    start = time.perf_counter()

    try:
        with httpx.Client(timeout=timeout, trust_env=False) as client:
            response = client.get(base_url)

    except httpx.TimeoutException:
        _log_failure(start, "Connection timeout", base_url)
        return False

    except httpx.HTTPError as e:
        _log_failure(start, str(e) or type(e).__name__, base_url)
        return False

    except Exception as e:
        # Malformed hosts can surface as non-httpx errors (e.g. idna, ValueError)
        _log_failure(start, f"{type(e).__name__}: {e!s}", base_url)
        return False

    log_external_call_end(
        logger,
        "druid-broker",
        "status",
        success=True,
        duration_ms=(time.perf_counter() - start) * 1000,
    )
    logger.debug("Broker reachable", base_url=base_url, status_code=response.status_code)
    return True


def _log_failure(start: float, error: str, base_url: str) -> None:
    log_external_call_end(
        logger.bind(base_url=base_url),
        "druid-broker",
        "status",
        success=False,
        duration_ms=(time.perf_counter() - start) * 1000,
        error=error,
    )
