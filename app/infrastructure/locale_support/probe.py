"""Locale probe against the Facebook SDK.

Facebook serves its JavaScript SDK per locale under
``<base>/<locale>/sdk.js``. An unknown locale does not produce an HTTP error;
the SDK endpoint answers 200 with a body containing an error phrase. That
phrase is an undocumented format and no structured error code exists, so
matching it is isolated in ``is_invalid_locale_response``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import requests

from infrastructure.configuration.integrations.facebook import FacebookSettings
from infrastructure.logging import get_module_logger

logger = get_module_logger()

INVALID_LOCALE_MARKER = "is not a valid locale"


class ProbeStatus(Enum):
    """Outcome of a locale probe.

    Attributes:
        SUPPORTED: 2xx response without the invalid-locale marker
        UNSUPPORTED: 2xx response carrying the invalid-locale marker
        HTTP_ERROR: Non-2xx response
        TRANSPORT_ERROR: Timeout, connection failure or unreadable response
    """

    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class ProbeResult:
    """Result of probing one locale.

    Attributes:
        status: ProbeStatus -- high-level outcome
        url: str -- probed URL
        status_code: Optional[int] -- HTTP status, when a response arrived
        error: Optional[str] -- transport error description
    """

    status: ProbeStatus
    url: str
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_supported(self) -> bool:
        """Only a clean 2xx answer counts as support."""
        return self.status == ProbeStatus.SUPPORTED


def is_invalid_locale_response(body: str, marker: str = INVALID_LOCALE_MARKER) -> bool:
    """Check whether a probe response body reports an unknown locale.

    Args:
        body: Decoded response body.
        marker: Phrase the platform uses for unknown locales.

    Returns:
        True if the marker occurs in the body.
    """
    return marker in body


class LocaleProbe:
    """Issues a single bounded GET for a locale-specific SDK resource.

    No retries are made; one failed probe means "unsupported" for the
    caller's cache window.
    """

    def __init__(
        self,
        settings: FacebookSettings,
        session: Optional[requests.Session] = None,
    ):
        """Initialize locale probe.

        Args:
            settings: Facebook settings (base URL, resource, timeout, marker).
            session: Optional requests session (injectable for tests).
        """
        self.base_url = settings.FACEBOOK_SDK_BASE_URL.rstrip("/")
        self.resource = settings.FACEBOOK_SDK_RESOURCE.lstrip("/")
        self.timeout = settings.FACEBOOK_PROBE_TIMEOUT_SECONDS
        self.marker = settings.FACEBOOK_INVALID_LOCALE_MARKER
        self._session = session or requests.Session()
        self.log = logger

    def url_for(self, tag: str) -> str:
        return f"{self.base_url}/{tag}/{self.resource}"

    def probe(self, tag: str, logger: Optional[Any] = None) -> ProbeResult:
        """Probe the platform for a locale.

        Args:
            tag: Region tag string (e.g., "fr_FR").
            logger: Optional caller logger receiving the outcome events
                instead of the module logger.

        Returns:
            ProbeResult describing the outcome. Never raises for transport
            or response errors.
        """
        url = self.url_for(tag)
        log = logger if logger is not None else self.log

        try:
            response = self._session.get(url, timeout=self.timeout)
            body = response.text
        except requests.Timeout:
            log.info("locale_probe_timeout", tag=tag, url=url, timeout=self.timeout)
            return ProbeResult(
                ProbeStatus.TRANSPORT_ERROR, url, error=f"timeout after {self.timeout}s"
            )
        except requests.RequestException as e:
            log.info("locale_probe_failed", tag=tag, url=url, error=str(e))
            return ProbeResult(ProbeStatus.TRANSPORT_ERROR, url, error=str(e))
        except Exception as e:
            log.info("locale_probe_unexpected_error", tag=tag, url=url, error=str(e))
            return ProbeResult(ProbeStatus.TRANSPORT_ERROR, url, error=str(e))

        if not 200 <= response.status_code < 300:
            log.info(
                "locale_probe_http_error", tag=tag, url=url, status_code=response.status_code
            )
            return ProbeResult(ProbeStatus.HTTP_ERROR, url, response.status_code)

        if is_invalid_locale_response(body, self.marker):
            log.info("locale_probe_unsupported", tag=tag, url=url)
            return ProbeResult(ProbeStatus.UNSUPPORTED, url, response.status_code)

        log.debug("locale_probe_supported", tag=tag, url=url)
        return ProbeResult(ProbeStatus.SUPPORTED, url, response.status_code)

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()
