from datetime import datetime

API_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
CLI_DATE_FORMAT = "%Y-%m-%d"


def format_api_datetime(dt: datetime) -> str:
    """Format a datetime as YYYY-MM-DDTHH:MM:SS (second precision, no offset)."""
    return dt.strftime(API_DATETIME_FORMAT)


def parse_cli_datetime(value: str) -> datetime:
    """Parse YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS into a datetime."""
    for fmt in (API_DATETIME_FORMAT, CLI_DATE_FORMAT):
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date {value!r}, expected YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS"
    )
