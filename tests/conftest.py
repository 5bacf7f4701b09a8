import pytest

from waf_analytics.config.settings import Settings


def make_settings(**overrides) -> Settings:
    values = dict(
        env="test",
        log_level="INFO",
        log_file="logs/test.log",
        variant="day",
        database_name="prod_waf_logs",
        results_bucket="aws-athena-query-results-123456789012-us-east-1",
        force_destroy=True,
        table_name="waf_prod_acquisition_logs",
        log_bucket="s3-waf-prod-acquisition-all-logs",
        log_prefix="2021/10",
        partition_days=["16", "17", "18"],
        projection_range_start="2021/10/16/00",
        projection_format="yyyy/MM/dd/HH",
        projection_interval=1,
        projection_interval_unit="HOURS",
        register_uri="/api/2/register",
        register_method="POST",
        request_threshold=10,
        window_start="2021/10/16",
        window_end="2021/10/19",
        aws_region="us-east-1",
        athena_workgroup="",
        athena_output_location="s3://aws-athena-query-results-123456789012-us-east-1/",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    return make_settings()
