import json

from pydantic import ValidationError

from dhl_tracking.errors import InvalidJsonError, SchemaViolationError
from dhl_tracking.log_config import get_logger
from dhl_tracking.models import TrackingStatus

logger = get_logger("decoder")


def format_path(loc: tuple) -> str:
    """Render a pydantic error location as ``$.sendungen[0].id``."""
    path = "$"
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}"
    return path


def decode(json_text: str) -> TrackingStatus:
    """Map the extracted JSON onto TrackingStatus.

    Upstream (German) and English field names are both accepted and unknown
    fields are ignored. Raises InvalidJsonError when the text is not JSON and
    SchemaViolationError when a required field is missing or mistyped.
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise InvalidJsonError(e.msg, e.lineno, e.colno) from e
    except RecursionError as e:
        raise InvalidJsonError("nested too deeply") from e

    try:
        status = TrackingStatus.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0]
        path = format_path(first["loc"])
        logger.debug(f"{len(errors)} schema violation(s), first at {path}")
        raise SchemaViolationError(path, first["msg"], errors) from e

    logger.debug(f"Decoded {len(status.items)} tracking item(s)")
    return status


def encode(status: TrackingStatus) -> str:
    """Serialize with the English field names; ``decode`` reads it back."""
    return status.model_dump_json()
