"""
Campaign Request Builders

Builds the outbound request components for the campaign backend:
- Profile subscription URL
- Profile request JSON body
- Message tracking URL

Every builder either returns a complete, well-formed artifact or None.
Construction errors are raised internally, reported to the log sink and
collapsed to None at the builder boundary.
"""

import json
import logging
import re
from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode

import httpx

from core.logger import LoggingSink

from .constants import (
    EXPERIENCE_CLOUD_ID_KEY,
    HTTPS_SCHEME,
    LOG_TAG,
    PROFILE_URL_PATH,
    PUSH_PLATFORM_APNS,
    PUSH_PLATFORM_KEY,
    TRACKING_ECID_PARAM,
    TRACKING_ID_PARAM,
    TRACKING_ID_SEPARATOR,
    TRACKING_URL_PATH,
)
from .models import ProfileAttributes
from .protocols import (
    AssemblyFailureError,
    CampaignRequestError,
    CampaignStateProtocol,
    LogSinkProtocol,
    MissingConfigurationError,
)

logger = logging.getLogger(__name__)

_default_sink = LoggingSink(logger)

# Single DNS label; the full hostname is one or more labels joined by dots
_HOST_LABEL = r"[A-Za-z0-9_](?:[A-Za-z0-9_-]{0,61}[A-Za-z0-9_])?"
_ASCII_HOSTNAME = re.compile(rf"^{_HOST_LABEL}(?:\.{_HOST_LABEL})*\.?$")
_DOT_SEGMENTS = {".", ".."}


# ====================
# Shared validation helpers
# ====================


def _report(sink: LogSinkProtocol, message: str) -> None:
    """Send a diagnostic to the sink without letting it affect the result"""
    try:
        sink.error(LOG_TAG, message)
    except Exception as e:
        logger.debug(f"Log sink failed: {e}")


def _require(context: str, **values: Optional[str]) -> None:
    """Raise MissingConfigurationError naming every absent or empty value"""
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise MissingConfigurationError(missing, context=context)


def _quote(value: str, safe: str = "", encoding=None, errors=None) -> str:
    """Percent-encode a value, failing on text that has no UTF-8 form"""
    try:
        return quote(value, safe=safe, encoding=encoding, errors=errors)
    except UnicodeEncodeError as e:
        raise AssemblyFailureError(f"Value {value!r} cannot be represented in a URL: {e}") from e


def _path_segment(value: str) -> str:
    """Escape a value so it occupies exactly one path segment"""
    if value in _DOT_SEGMENTS:
        raise AssemblyFailureError(f"Path segment cannot be {value!r}")
    return _quote(value)


def _validate_host(host: str) -> None:
    if host.isascii() and not _ASCII_HOSTNAME.match(host):
        raise AssemblyFailureError(f"Invalid host {host!r}")


def _build_https_url(host: str, path: str, query: Optional[str] = None) -> httpx.URL:
    """
    Assemble an absolute https URL.

    Hostnames are case-insensitive; the host is emitted in lowercase.

    Raises:
        AssemblyFailureError: if the components do not form a valid URL
    """
    _validate_host(host)

    components: Dict[str, Any] = {
        "scheme": HTTPS_SCHEME,
        "host": host,
        "path": path,
    }
    if query:
        components["query"] = query.encode("ascii")

    try:
        url = httpx.URL(**components)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise AssemblyFailureError(f"Invalid URL components: {e}") from e

    if url.scheme != HTTPS_SCHEME or not url.host:
        raise AssemblyFailureError(f"Assembled URL is not absolute https: {url}")
    return url


def _serialize(profile_data: Dict[str, str]) -> str:
    """Encode a string-to-string mapping as JSON text"""
    for key, value in profile_data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise AssemblyFailureError(
                f"Profile data must map strings to strings, got {key!r}: {type(value).__name__}"
            )
    try:
        body = json.dumps(profile_data, ensure_ascii=False)
        body.encode("utf-8")
    except (TypeError, ValueError) as e:
        raise AssemblyFailureError(f"JSON encoding failed: {e}") from e
    return body


# ====================
# Builders
# ====================


def build_profile_url(
    state: CampaignStateProtocol,
    log_sink: Optional[LogSinkProtocol] = None,
) -> Optional[httpx.URL]:
    """
    Build the URL for a Campaign profile request.

    Args:
        state: Campaign state providing server, pkey and ecid
        log_sink: Diagnostic sink, defaults to the module logger

    Returns:
        https://{server}/rest/head/mobileAppV5/{pkey}/subscriptions/{ecid},
        or None if the state is incomplete or the URL cannot be built
        (the server is lowercased, values that cannot be encoded as UTF-8
        count as a build failure)
    """
    sink = log_sink or _default_sink
    server, pkey, ecid = state.server, state.pkey, state.ecid

    try:
        _require("profile url configuration", server=server, pkey=pkey, ecid=ecid)
    except MissingConfigurationError as e:
        _report(sink, f"The Campaign state did not contain the necessary configuration to build the profile url ({e}), returning None.")
        return None

    try:
        path = PROFILE_URL_PATH.format(pkey=_path_segment(pkey), ecid=_path_segment(ecid))
        return _build_https_url(server, path)
    except AssemblyFailureError as e:
        _report(sink, f"Building Campaign profile URL failed: {e}, returning None.")
        return None


def build_profile_body(
    state: CampaignStateProtocol,
    data: Optional[ProfileAttributes] = None,
    log_sink: Optional[LogSinkProtocol] = None,
) -> Optional[str]:
    """
    Build the JSON payload for a Campaign profile request.

    Caller attributes are copied first; the identity and push platform keys
    are then set unconditionally, so they override any caller value.

    Args:
        state: Campaign state providing the ecid
        data: Additional profile attributes
        log_sink: Diagnostic sink, defaults to the module logger

    Returns:
        JSON object text, or None if the ecid is missing or encoding fails
    """
    sink = log_sink or _default_sink
    ecid = state.ecid

    try:
        _require("identity", ecid=ecid)
    except MissingConfigurationError:
        _report(sink, "The Campaign state did not contain an experience cloud id, returning None.")
        return None

    try:
        try:
            profile_data = dict(data or {})
        except (TypeError, ValueError) as e:
            raise AssemblyFailureError(f"Profile data is not a mapping: {e}") from e
        profile_data[EXPERIENCE_CLOUD_ID_KEY] = ecid
        profile_data[PUSH_PLATFORM_KEY] = PUSH_PLATFORM_APNS
        return _serialize(profile_data)
    except AssemblyFailureError as e:
        _report(sink, f"Failed to create a json string payload ({e}), returning None.")
        return None


def build_tracking_url(
    host: str,
    broad_log_id: str,
    delivery_id: str,
    action: str,
    ecid: str,
    log_sink: Optional[LogSinkProtocol] = None,
) -> Optional[httpx.URL]:
    """
    Build the URL for message interaction tracking.

    Args:
        host: Campaign tracking server
        broad_log_id: Broadlog id of the message
        delivery_id: Delivery id of the message
        action: Interaction type (impression, click, open)
        ecid: Experience Cloud ID of the user
        log_sink: Diagnostic sink, defaults to the module logger

    Returns:
        https://{host}/r?id={broad_log_id},{delivery_id},{action}&mcId={ecid},
        or None if any input is empty or the URL cannot be built
    """
    sink = log_sink or _default_sink

    try:
        _require(
            "tracking",
            host=host,
            broad_log_id=broad_log_id,
            delivery_id=delivery_id,
            action=action,
            ecid=ecid,
        )
        tracking_id = TRACKING_ID_SEPARATOR.join((broad_log_id, delivery_id, action))
        query = urlencode(
            [(TRACKING_ID_PARAM, tracking_id), (TRACKING_ECID_PARAM, ecid)],
            safe=TRACKING_ID_SEPARATOR,
            quote_via=_quote,
        )
        return _build_https_url(host, TRACKING_URL_PATH, query)
    except CampaignRequestError as e:
        _report(sink, f"Building Campaign tracking URL failed: {e}, returning None.")
        return None
