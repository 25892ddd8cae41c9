import re
from typing import Optional

from ..models import LocationQuery

LOCAL_INFO_PATH = re.compile(r"/clients/local_info/(\d+)/(-?\d+)", re.ASCII)


def parse_location_and_offset(path: Optional[str]) -> Optional[LocationQuery]:
    """
    Pull the ZIP and UTC offset out of a '/clients/local_info/<zip>/<offset>'
    path.  Returns None when the path does not carry them.
    """
    if not isinstance(path, str):
        return None
    match = LOCAL_INFO_PATH.search(path)
    if match is None:
        return None
    return LocationQuery(postal_code=match.group(1), utc_offset_hours=int(match.group(2), 10))
