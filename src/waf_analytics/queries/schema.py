from __future__ import annotations

from dataclasses import dataclass

JSON_SERDE = "org.openx.data.jsonserde.JsonSerDe"
TEXT_INPUT_FORMAT = "org.apache.hadoop.mapred.TextInputFormat"
HIVE_OUTPUT_FORMAT = "org.apache.hadoop.hive.ql.io.HiveIgnoreKeyTextOutputFormat"

# WAF records carry httpRequest as an array of structs; only the fields the
# detection query reads are declared.
_HTTP_REQUEST_COLUMN = """httpRequest array<
            struct<clientIp: string,
                   uri: string,
                   httpMethod: string>>"""


@dataclass(frozen=True)
class PartitionProjection:
    """Date-range projection on the ``datehour`` partition key."""

    range_start: str = "2021/10/16/00"
    format: str = "yyyy/MM/dd/HH"
    interval: int = 1
    interval_unit: str = "HOURS"

    def range(self) -> str:
        return f"{self.range_start},NOW"


def log_location(log_bucket: str, log_prefix: str = "") -> str:
    """s3://bucket/prefix/ with exactly one trailing slash."""
    prefix = log_prefix.strip("/")
    if prefix:
        return f"s3://{log_bucket}/{prefix}/"
    return f"s3://{log_bucket}/"


def create_table_query(table_name: str, log_bucket: str, log_prefix: str = "") -> str:
    return f"""CREATE EXTERNAL TABLE IF NOT EXISTS {table_name} (
        {_HTTP_REQUEST_COLUMN}
    )
    PARTITIONED BY (
      day string
    )
    ROW FORMAT SERDE '{JSON_SERDE}'
    LOCATION '{log_location(log_bucket, log_prefix)}';"""


def create_projected_table_query(
    table_name: str,
    log_bucket: str,
    projection: PartitionProjection = PartitionProjection(),
) -> str:
    # ${datehour} is resolved by Athena, not here.
    template = f"s3://{log_bucket}/" + "${datehour}"
    return f"""CREATE EXTERNAL TABLE IF NOT EXISTS {table_name} (
        {_HTTP_REQUEST_COLUMN}
    )
    PARTITIONED BY (
        datehour STRING
    )
    ROW FORMAT SERDE '{JSON_SERDE}'
    STORED AS INPUTFORMAT '{TEXT_INPUT_FORMAT}'
    OUTPUTFORMAT '{HIVE_OUTPUT_FORMAT}'
    LOCATION '{log_location(log_bucket)}'
    TBLPROPERTIES
    (
    "projection.enabled" = "true",
    "projection.datehour.type" = "date",
    "projection.datehour.range" = "{projection.range()}",
    "projection.datehour.format" = "{projection.format}",
    "projection.datehour.interval" = "{projection.interval}",
    "projection.datehour.interval.unit" = "{projection.interval_unit}",
    "storage.location.template" = "{template}"
    );"""
