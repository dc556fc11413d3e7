from os import getenv

import requests

from dhl_tracking.decoder import decode
from dhl_tracking.errors import DecodeError, ExtractionError, FetchError
from dhl_tracking.extractor import extract_json
from dhl_tracking.log_config import get_logger
from dhl_tracking.models import TrackingStatus

logger = get_logger("helpers")

TRACKING_URL = getenv("DHL_TRACKING_URL", "https://www.dhl.de/int-verfolgen/")
TRACKING_LANG = getenv("DHL_TRACKING_LANG", "en")
TRACKING_DOMAIN = getenv("DHL_TRACKING_DOMAIN", "de")
TRACKING_TIMEOUT = getenv("DHL_TRACKING_TIMEOUT", "10")


def parse_tracking_page(html: str) -> TrackingStatus:
    """Extract and decode the tracking state embedded in a DHL tracking page.

    Use this directly when the page comes from your own HTTP client. Errors
    derive from DHLTrackingError and carry the failing ``stage``.
    """
    try:
        json_text = extract_json(html)
    except ExtractionError as e:
        logger.warning(f"Could not extract tracking state: {e}")
        raise

    try:
        return decode(json_text)
    except DecodeError as e:
        logger.warning(f"Could not decode tracking state: {e}")
        raise


def tracking_url(tracking_code: str) -> str:
    params = {"lang": TRACKING_LANG, "domain": TRACKING_DOMAIN, "piececode": tracking_code}
    return requests.Request("GET", TRACKING_URL, params=params).prepare().url


def fetch_tracking_page(tracking_code: str, session: requests.Session = None) -> str:
    url = tracking_url(tracking_code)
    get = session.get if session is not None else requests.get

    try:
        timeout = float(TRACKING_TIMEOUT)
    except ValueError as e:
        raise FetchError(f"DHL_TRACKING_TIMEOUT must be a number of seconds, got {TRACKING_TIMEOUT!r}", url) from e

    logger.debug(f"Fetching {url}")
    try:
        res = get(url, timeout=timeout)
    except requests.exceptions.Timeout as e:
        logger.warning(f"Timed out fetching tracking page for {tracking_code}")
        raise FetchError(f"Timed out after {timeout}s", url) from e
    except requests.exceptions.RequestException as e:
        logger.warning(f"Failed to fetch tracking page for {tracking_code}: {e}")
        raise FetchError(f"Request failed: {e}", url) from e

    if res.status_code >= 400:
        logger.warning(f"Tracking page for {tracking_code} returned HTTP {res.status_code}")
        raise FetchError(f"HTTP {res.status_code}", url, res.status_code)

    return res.text


def retrieve_package_status(tracking_code: str, session: requests.Session = None) -> TrackingStatus:
    """Fetch the tracking page for ``tracking_code`` and parse it.

    Check ``item.found`` on each returned item before reading its details.
    """
    status = parse_tracking_page(fetch_tracking_page(tracking_code, session))
    logger.info(f"Retrieved {len(status.items)} item(s) for {tracking_code}")
    return status
