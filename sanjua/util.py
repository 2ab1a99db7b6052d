"""Helper functions for the sanjua-package."""

from typing import Optional
import os
from datetime import datetime, timezone, timedelta


def now(keep_micro: bool = False, utcdelta: Optional[int] = None) -> datetime:
    """
    Helper for getting datetime.now() in specific format for UTC + utcdelta.

    Keyword arguments:
    keep_micro -- if `False`, set datetime microseconds to zero
                  (default False)
    utcdelta -- optional timedelta for UTC-timezone in hours
                (default None: if `None`, either the environment
                variable `UTC_TIMEZONE_OFFSET` (if set) or a fallback of
                0 is used)
    """

    if utcdelta is None:
        _utcdelta = int(os.environ.get("UTC_TIMEZONE_OFFSET") or 0)
    else:
        _utcdelta = utcdelta

    result = datetime.now(tz=timezone(timedelta(hours=_utcdelta)))
    if keep_micro:
        return result
    return result.replace(microsecond=0)
