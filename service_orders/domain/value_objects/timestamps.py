from datetime import datetime
from typing import Optional

ORDER_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
CLIENT_TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M"


def parse_timestamp(value: datetime | str | None) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def format_timestamp(value: Optional[datetime], fmt: str = ORDER_TIMESTAMP_FORMAT) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(fmt)
