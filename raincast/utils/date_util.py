from datetime import datetime

import pytz
from dateutil import parser

from raincast.utils.log_util import app_logger

logger = app_logger(__name__)


def to_date(date_string: str, tz_name: str = None) -> datetime:
    """
    Convert a date string to a datetime object.

    Naive results are localized to tz_name when one is given; strings that
    carry their own offset keep it.

    :param date_string: str - The date string to parse.
    :param tz_name: str - Optional IANA zone for naive timestamps.
    :return: datetime - Parsed datetime object.
    :raises: Exception if date string parsing fails.
    """
    try:
        parsed = parser.isoparse(date_string)
    except Exception as e:
        logger.error(f"Error parsing date string {date_string!r}: {e}", exc_info=True)
        raise

    if tz_name and parsed.tzinfo is None:
        parsed = pytz.timezone(tz_name).localize(parsed)
    return parsed
