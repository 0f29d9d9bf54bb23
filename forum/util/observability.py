"""Observability configuration using Logfire.

Every backend call, use case and store action reports through Logfire:

    with logfire.span("load_forum", context_id=context_id):
        ...
    logfire.warn("Reply parent not in forest, reply not inserted", parent_id=parent_id)
"""

from importlib.metadata import PackageNotFoundError, version

import logfire

from forum.config import ObservabilitySettings, Settings

SERVICE_NAME = "forum-client"

_httpx_instrumented = False


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether to ship telemetry to Logfire cloud.

    An explicit setting wins; otherwise send only when a token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def _service_version() -> str:
    try:
        return version("forum-qa")
    except PackageNotFoundError:
        return "0.0.0"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the forum client.

    Console output is always on; cloud sending follows ``should_send``.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = should_send(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=_service_version(),
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        has_token=bool(observability.logfire_token),
        backend=settings.backend.base_url,
    )


def instrument_httpx() -> None:
    """Trace requests to the Q&A backend. Safe to call more than once."""
    global _httpx_instrumented
    if _httpx_instrumented:
        return
    # Request headers are not captured; they carry the bearer token
    logfire.instrument_httpx(capture_headers=False)
    _httpx_instrumented = True
    logfire.info("httpx instrumented")
