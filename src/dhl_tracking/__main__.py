import sys

from dhl_tracking.decoder import encode
from dhl_tracking.errors import DHLTrackingError
from dhl_tracking.helpers import parse_tracking_page, retrieve_package_status, tracking_url
from dhl_tracking.log_config import setup_logging
from dhl_tracking.models import TrackingItem

USAGE = "Usage: python3 -m dhl_tracking <tracking_code> [--html <file>] [--json]"


def format_item(item: TrackingItem) -> str:
    if not item.found:
        return f"Package ({item.id}) not found"

    lines = [item.id, tracking_url(item.id)]
    event = item.last_event
    if event is None:
        lines.append("Status: Unknown")
    else:
        lines.append(f"Location: {event.location or 'Unknown'}")
        lines.append(f"Status: {event.status}")
        try:
            date = event.timestamp().strftime("%d-%m-%Y, %H:%M")
        except ValueError:
            # Not ISO, show it the way DHL sent it
            date = event.date
        lines.append(f"Date: {date}")

    if item.details is not None and item.details.destination_country:
        lines.append(f"Destination: {item.details.destination_country}")

    return "\n".join(lines)


def main(argv: list = None) -> int:
    logger = setup_logging()
    args = sys.argv[1:] if argv is None else list(argv)

    as_json = "--json" in args
    if as_json:
        args.remove("--json")

    html_file = None
    if "--html" in args:
        i = args.index("--html")
        if i + 1 >= len(args):
            logger.error(USAGE)
            return 1
        html_file = args[i + 1]
        del args[i:i + 2]

    if len(args) != 1:
        logger.error(USAGE)
        return 1
    tracking_code = args[0]

    try:
        if html_file is None:
            status = retrieve_package_status(tracking_code)
        else:
            with open(html_file, "r", encoding="utf-8") as file:
                status = parse_tracking_page(file.read())
    except DHLTrackingError as e:
        logger.error(f"Failed to retrieve package info for {tracking_code}: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not read {html_file}: {e}")
        return 1

    if as_json:
        print(encode(status))
    else:
        print("\n\n".join(format_item(item) for item in status.items))

    return 0


if __name__ == "__main__":
    sys.exit(main())
