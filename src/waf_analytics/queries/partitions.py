from __future__ import annotations

from typing import Iterable

from waf_analytics.queries.schema import log_location


def partition_location(log_bucket: str, log_prefix: str, day: str) -> str:
    return f"{log_location(log_bucket, log_prefix)}{day}"


def add_partitions_query(
    table_name: str,
    log_bucket: str,
    log_prefix: str,
    days: Iterable[str] = ("16", "17", "18"),
) -> str:
    """ALTER TABLE statement registering one ``day`` partition per entry.

    Days are taken as given; new log dates mean a new list of days.
    """
    clauses = [
        f"PARTITION (day='{day}') LOCATION '{partition_location(log_bucket, log_prefix, day)}'"
        for day in days
    ]
    body = "\n        ".join(clauses)
    return f"""ALTER TABLE {table_name} ADD IF NOT EXISTS
        {body};"""
