import logging
from time import monotonic

import httpx

from gitgraphed.core.errors import ContributionReadError
from gitgraphed.core.errors import ContributionStatusError
from gitgraphed.core.errors import ContributionTransportError
from gitgraphed.settings import Settings


logger = logging.getLogger(__name__)


def build_contributions_url(base_url: str, username: str, year: int) -> str:
    """Build the contributions calendar URL covering one calendar year."""

    return (
        f"{base_url.rstrip('/')}/users/{username}/contributions"
        f"?from={year}-01-01&to={year}-12-31"
    )


def _check_deadline(deadline: float, url: str, timeout: float) -> None:
    if monotonic() > deadline:
        raise ContributionTransportError(f"Request to {url} timed out after {timeout:g}s")


def fetch_contributions_page(
    username: str,
    year: int,
    app_settings: Settings,
    transport: httpx.BaseTransport | None = None,
) -> str:
    """Fetch the raw contributions calendar HTML for one user and year.

    The endpoint serves different markup to non-browser clients, so the
    request carries browser-like User-Agent and Accept headers.

    Raises:
        ContributionTransportError: If the request cannot be sent or the
            whole exchange takes longer than the configured timeout.
        ContributionStatusError: If the response status is not 2xx.
        ContributionReadError: If the body cannot be fully read.
    """

    url = build_contributions_url(app_settings.github_base_url, username, year)
    headers = {
        "User-Agent": app_settings.user_agent,
        "Accept": app_settings.accept_header,
    }
    logger.info("contributions_url=%s", url)

    # httpx timeouts apply per phase; the deadline bounds the whole exchange.
    timeout = app_settings.request_timeout_seconds
    deadline = monotonic() + timeout

    with httpx.Client(
        headers=headers,
        timeout=timeout,
        follow_redirects=True,
        transport=transport,
    ) as client:
        try:
            with client.stream("GET", url) as response:
                logger.debug("status=%s", response.status_code)
                if not response.is_success:
                    raise ContributionStatusError(response.status_code)

                chunks: list[bytes] = []
                try:
                    _check_deadline(deadline, url, timeout)
                    for chunk in response.iter_bytes():
                        _check_deadline(deadline, url, timeout)
                        chunks.append(chunk)
                    _check_deadline(deadline, url, timeout)
                except httpx.HTTPError as exc:
                    raise ContributionReadError(
                        f"Failed to read response body: {exc}"
                    ) from exc
                html = b"".join(chunks).decode(response.encoding or "utf-8", "replace")
        except httpx.HTTPError as exc:
            raise ContributionTransportError(f"Request to {url} failed: {exc}") from exc

    logger.debug("body_length=%d", len(html))
    return html
