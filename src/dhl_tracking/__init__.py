"""Read DHL parcel tracking status from the state embedded in its tracking page."""

from .decoder import decode, encode
from .errors import (
    DecodeError,
    DHLTrackingError,
    ExtractionError,
    FetchError,
    InvalidJsonError,
    MalformedLiteralError,
    PatternNotFoundError,
    SchemaViolationError,
)
from .extractor import extract_json
from .helpers import fetch_tracking_page, parse_tracking_page, retrieve_package_status, tracking_url
from .models import History, HistoryEvent, ItemDetails, NotFoundInfo, TrackingItem, TrackingStatus

__all__ = [
    "decode",
    "encode",
    "extract_json",
    "parse_tracking_page",
    "fetch_tracking_page",
    "retrieve_package_status",
    "tracking_url",
    "TrackingStatus",
    "TrackingItem",
    "ItemDetails",
    "History",
    "HistoryEvent",
    "NotFoundInfo",
    "DHLTrackingError",
    "ExtractionError",
    "PatternNotFoundError",
    "MalformedLiteralError",
    "DecodeError",
    "InvalidJsonError",
    "SchemaViolationError",
    "FetchError",
]
