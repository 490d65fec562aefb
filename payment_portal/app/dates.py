import datetime as dt
from typing import Union

DateLike = Union[dt.date, dt.datetime, str, None]


def format_date_for_input(value: DateLike = None) -> str:
    """
    Format a date as YYYY-MM-DD, the value format of an <input type="date">.
    None means today; strings must be ISO-8601 (raises ValueError otherwise).
    """
    if value is None:
        d = dt.date.today()
    elif isinstance(value, dt.datetime):
        d = value.date()
    elif isinstance(value, dt.date):
        d = value
    else:
        d = dt.datetime.fromisoformat(str(value).strip()).date()
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"
