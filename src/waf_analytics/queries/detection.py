from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DateWindow:
    """Half-open [start, end) range over the projected ``datehour`` key."""

    start: str
    end: str

    def predicate(self) -> str:
        return f"datehour >= '{self.start}' AND datehour < '{self.end}'"


def top_user_query(
    table_name: str,
    uri: str = "/api/2/register",
    method: str = "POST",
    threshold: int = 10,
    window: Optional[DateWindow] = None,
) -> str:
    """Clients that sent at least ``threshold`` matching requests, busiest first."""
    filters = [
        f"httprequest[1].uri='{uri}'",
        f"httprequest[1].httpmethod='{method}'",
    ]
    if window is not None:
        filters.append(window.predicate())
    where = " AND\n            ".join(filters)

    return f"""with t1 as (
        SELECT
            httprequest[1].clientip clientip,
            httprequest[1].uri uri,
            httprequest[1].httpmethod httpmethod
        FROM {table_name}
        WHERE
            {where}
        )

        SELECT
            t1.clientip, count(*) as cnt
        FROM t1 group by t1.clientip
        having count(*) >= {threshold}
        order by cnt DESC"""
