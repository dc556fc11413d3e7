import re

from dhl_tracking.errors import MalformedLiteralError, PatternNotFoundError
from dhl_tracking.log_config import get_logger

logger = get_logger("extractor")

# The page is a script block, not parseable HTML. First match wins and the
# group runs to the rightmost `")` on that line, so trailing content is kept
# out of the capture as long as it has no `")` of its own.
DHL_JSON_REGEXP = re.compile(r'initialState: JSON\.parse\((.+")\)')


def extract_json(html: str) -> str:
    """Return the JSON text assigned to ``initialState`` in a tracking page.

    The page embeds the state as a double quoted string literal passed to
    ``JSON.parse``; the quotes are stripped and ``\\"`` is unescaped.

    Raises PatternNotFoundError when the page has no such assignment and
    MalformedLiteralError when the captured literal is too short to hold
    its own quotes.
    """
    match = DHL_JSON_REGEXP.search(html)
    if match is None:
        logger.debug(f"No initialState assignment in {len(html)} characters of HTML")
        raise PatternNotFoundError()

    literal = match.group(1).strip()
    if len(literal) < 2:
        raise MalformedLiteralError(literal)

    json_text = literal[1:-1].replace('\\"', '"')
    logger.debug(f"Extracted {len(json_text)} characters of JSON at offset {match.start(1)}")

    return json_text
