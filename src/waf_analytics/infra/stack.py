from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

import pulumi
import pulumi_aws as aws

from waf_analytics.config.settings import Settings
from waf_analytics.infra.console import configured_region, query_uri
from waf_analytics.logging.logger import get_logger
from waf_analytics.queries.detection import DateWindow, top_user_query
from waf_analytics.queries.partitions import add_partitions_query
from waf_analytics.queries.schema import (
    PartitionProjection,
    create_projected_table_query,
    create_table_query,
)

log = get_logger("infra.stack")


@dataclass(frozen=True)
class SavedQuery:
    resource_name: str
    export_name: str
    description: str
    query: str


def saved_queries(settings: Settings) -> List[SavedQuery]:
    """Named queries for the configured variant, in declaration order."""
    s = settings
    if s.variant == "hour":
        projection = PartitionProjection(
            range_start=s.projection_range_start,
            format=s.projection_format,
            interval=s.projection_interval,
            interval_unit=s.projection_interval_unit,
        )
        create_sql = create_projected_table_query(s.table_name, s.log_bucket, projection)
        window = DateWindow(start=s.window_start, end=s.window_end)
    else:
        create_sql = create_table_query(s.table_name, s.log_bucket, s.log_prefix)
        window = None

    queries = [
        SavedQuery(
            resource_name="create_waf_logs_table",
            export_name="createTableAthenaQueryUri",
            description="Create WAF logs table",
            query=create_sql,
        )
    ]
    if s.variant == "day":
        queries.append(
            SavedQuery(
                resource_name="add_waf_logs_partitions",
                export_name="addPartitionAthenaQueryUri",
                description="Add partitions to WAF logs table base on year, month, day",
                query=add_partitions_query(s.table_name, s.log_bucket, s.log_prefix, s.partition_days),
            )
        )
    queries.append(
        SavedQuery(
            resource_name="topUser",
            export_name="topUserQueryUri",
            description="Run query to get data",
            query=top_user_query(
                s.table_name,
                uri=s.register_uri,
                method=s.register_method,
                threshold=s.request_threshold,
                window=window,
            ),
        )
    )
    return queries


def declare_waf_stack(settings: Settings) -> Dict[str, pulumi.Output[str]]:
    """Declare the Athena database and its named queries.

    Returns export name -> console URI of each saved query.
    """
    region = configured_region()

    database = aws.athena.Database(
        settings.database_name,
        name=settings.database_name,
        bucket=settings.results_bucket,
        force_destroy=settings.force_destroy,
    )

    outputs: Dict[str, pulumi.Output[str]] = {}
    for sq in saved_queries(settings):
        named = aws.athena.NamedQuery(
            sq.resource_name,
            database=database.id,
            query=sq.query,
            description=sq.description,
        )
        outputs[sq.export_name] = named.id.apply(lambda qid: query_uri(qid, region))

    log.info(
        "Declared WAF analytics stack",
        extra={
            "variant": settings.variant,
            "database": settings.database_name,
            "table": settings.table_name,
            "queries": list(outputs),
        },
    )
    return outputs
