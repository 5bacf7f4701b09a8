from waf_analytics.queries.detection import DateWindow, top_user_query
from waf_analytics.queries.partitions import add_partitions_query, partition_location
from waf_analytics.queries.schema import (
    PartitionProjection,
    create_projected_table_query,
    create_table_query,
    log_location,
)

TABLE = "waf_prod_acquisition_logs"
BUCKET = "s3-waf-prod-acquisition-all-logs"


def test_log_location_normalises_slashes():
    assert log_location(BUCKET) == f"s3://{BUCKET}/"
    assert log_location(BUCKET, "2021/10") == f"s3://{BUCKET}/2021/10/"
    assert log_location(BUCKET, "/2021/10/") == f"s3://{BUCKET}/2021/10/"


def test_create_table_query_substitutes_table_and_bucket():
    sql = create_table_query(TABLE, BUCKET, "2021/10")

    assert sql.startswith(f"CREATE EXTERNAL TABLE IF NOT EXISTS {TABLE} (")
    assert f"LOCATION 's3://{BUCKET}/2021/10/';" in sql
    assert "day string" in sql
    assert "ROW FORMAT SERDE 'org.openx.data.jsonserde.JsonSerDe'" in sql
    assert "struct<clientIp: string" in sql
    assert "TBLPROPERTIES" not in sql


def test_create_projected_table_query_includes_projection_properties():
    sql = create_projected_table_query(TABLE, BUCKET)

    assert f"CREATE EXTERNAL TABLE IF NOT EXISTS {TABLE} (" in sql
    assert "datehour STRING" in sql
    assert f"LOCATION 's3://{BUCKET}/'" in sql
    assert '"projection.enabled" = "true"' in sql
    assert '"projection.datehour.type" = "date"' in sql
    assert '"projection.datehour.range" = "2021/10/16/00,NOW"' in sql
    assert '"projection.datehour.format" = "yyyy/MM/dd/HH"' in sql
    assert '"projection.datehour.interval" = "1"' in sql
    assert '"projection.datehour.interval.unit" = "HOURS"' in sql
    assert '"storage.location.template" = "s3://' + BUCKET + '/${datehour}"' in sql
    assert sql.rstrip().endswith(");")


def test_create_projected_table_query_custom_projection():
    projection = PartitionProjection(range_start="2022/01/01/00", interval=6)
    sql = create_projected_table_query(TABLE, BUCKET, projection)

    assert '"projection.datehour.range" = "2022/01/01/00,NOW"' in sql
    assert '"projection.datehour.interval" = "6"' in sql


def test_add_partitions_query_emits_three_default_days():
    sql = add_partitions_query(TABLE, BUCKET, "2021/10")

    assert sql.startswith(f"ALTER TABLE {TABLE} ADD IF NOT EXISTS")
    assert sql.count("PARTITION (day=") == 3
    for day in ("16", "17", "18"):
        assert f"PARTITION (day='{day}') LOCATION 's3://{BUCKET}/2021/10/{day}'" in sql
    assert sql.endswith(f"LOCATION 's3://{BUCKET}/2021/10/18';")


def test_add_partitions_query_follows_given_days():
    sql = add_partitions_query(TABLE, BUCKET, "2021/11", ["01", "02"])

    assert sql.count("PARTITION (day=") == 2
    assert partition_location(BUCKET, "2021/11", "02") in sql


def test_top_user_query_defaults():
    sql = top_user_query(TABLE)

    assert f"FROM {TABLE}" in sql
    assert "httprequest[1].uri='/api/2/register'" in sql
    assert "httprequest[1].httpmethod='POST'" in sql
    assert "having count(*) >= 10" in sql
    assert "order by cnt DESC" in sql
    assert "datehour" not in sql


def test_top_user_query_with_window_and_threshold():
    sql = top_user_query(TABLE, threshold=25, window=DateWindow("2021/10/16", "2021/10/19"))

    assert "having count(*) >= 25" in sql
    assert "httprequest[1].httpmethod='POST' AND" in sql
    assert "datehour >= '2021/10/16' AND datehour < '2021/10/19'" in sql
