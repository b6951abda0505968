"""
HTTP bridge between the URL formatter, a transport backend and the decoder.

The transport is a single narrow interface (`send(url) -> bytes`) so that any HTTP
library can be plugged in; `RequestsBackend` is the bundled implementation.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Protocol, Union, runtime_checkable

import requests

from ..errors import InvalidUriError, TransportError
from ..models import Forecast, decode
from ..options import Options
from ..util import format_request_exception, redact_token, uri, uri_optioned
from ..util.uri import API_URL, TimeValue

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_HEADERS = {"Accept": "application/json", "Accept-Encoding": "gzip"}

OptionsArg = Union[Options, Callable[[Options], Options], None]


@runtime_checkable
class HttpBackend(Protocol):
    """Anything that can GET an absolute URL and return the raw body."""

    def send(self, url: str) -> bytes:
        ...


class RequestsBackend:
    """
    Backend built on `requests`.

    Attributes:
        session: Session used for requests (a new one is created when omitted).
        timeout: Per-request timeout in seconds.
        headers: Extra headers sent with every request.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}

    def send(self, url: str) -> bytes:
        """
        GET the URL and return the response body.

        Raises:
            InvalidUriError: If requests cannot parse the URL.
            TransportError: On connection failures, timeouts and non-2xx statuses.
        """
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema) as exc:
            raise InvalidUriError(f"Invalid request URL: {exc}", url=url) from exc
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise TransportError(
                f"HTTP error calling DarkSky: {format_request_exception(exc)}",
                status_code=status,
                response=exc.response,
            ) from exc
        except requests.RequestException as exc:
            raise TransportError(f"HTTP error calling DarkSky: {format_request_exception(exc)}") from exc
        logger.debug("DarkSky responded %s (%s bytes)", response.status_code, len(response.content))
        return response.content


def _resolve_options(options: OptionsArg) -> Options:
    """Accept an Options value or a function that configures a fresh one."""
    if options is None:
        return Options()
    if isinstance(options, Options):
        return options
    return options(Options())


class DarkskyClient:
    """
    Forecast client bound to one API token.

    The client keeps no per-request state, so one instance can serve concurrent
    callers as long as the backend can.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = API_URL,
        backend: Optional[HttpBackend] = None,
    ) -> None:
        if not token:
            raise ValueError("A DarkSky API token is required.")
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.backend = backend or RequestsBackend()

    def get_forecast(self, latitude: float, longitude: float) -> Forecast:
        """Fetch the forecast for a location with units chosen by the API."""
        url = uri(self.token, latitude, longitude, base_url=self.base_url)
        return self._fetch(url)

    def get_forecast_with_options(
        self,
        latitude: float,
        longitude: float,
        options: OptionsArg = None,
    ) -> Forecast:
        """
        Fetch the forecast with explicit options.

        `options` may be an Options value or a callable receiving a default
        Options and returning the configured one:

            client.get_forecast_with_options(lat, lon, lambda o: o.unit(Unit.SI))
        """
        url = uri_optioned(
            self.token,
            latitude,
            longitude,
            _resolve_options(options),
            base_url=self.base_url,
        )
        return self._fetch(url)

    def get_forecast_time_machine(
        self,
        latitude: float,
        longitude: float,
        time: TimeValue,
        options: OptionsArg = None,
    ) -> Forecast:
        """Fetch observed or forecast conditions for a specific time."""
        url = uri_optioned(
            self.token,
            latitude,
            longitude,
            _resolve_options(options),
            time,
            base_url=self.base_url,
        )
        return self._fetch(url)

    def _fetch(self, url: str) -> Forecast:
        safe_url = redact_token(url, self.token)
        logger.debug("Requesting DarkSky forecast (%s)", safe_url)
        body = self.backend.send(url)
        forecast = decode(body)
        logger.info("Fetched DarkSky forecast (%s)", safe_url)
        return forecast


def get_forecast(
    token: str,
    latitude: float,
    longitude: float,
    options: OptionsArg = None,
    *,
    time: Optional[TimeValue] = None,
    base_url: str = API_URL,
    backend: Optional[HttpBackend] = None,
) -> Forecast:
    """
    One-shot forecast fetch.

    Without options or time this takes the `units=auto` path; otherwise it formats
    the options verbatim.
    """
    client = DarkskyClient(token, base_url=base_url, backend=backend)
    if time is not None:
        return client.get_forecast_time_machine(latitude, longitude, time, options)
    if options is None:
        return client.get_forecast(latitude, longitude)
    return client.get_forecast_with_options(latitude, longitude, options)


__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "HttpBackend",
    "RequestsBackend",
    "DarkskyClient",
    "get_forecast",
]
