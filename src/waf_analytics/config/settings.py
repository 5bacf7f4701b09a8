from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
import yaml
from dotenv import load_dotenv

from waf_analytics.exceptions.errors import ConfigurationError

load_dotenv()

VARIANTS = ("day", "hour")

def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)

def _env_bool(key: str, default: bool = False) -> bool:
    val = os.environ.get(key)
    if val is None:
        return default
    return val.strip().lower() in ("1", "true", "yes", "y", "on")

def _env_list(key: str, default: List[str]) -> List[str]:
    val = os.environ.get(key)
    if not val:
        return default
    return [x.strip() for x in val.split(",") if x.strip()]

def _day(val) -> str:
    # YAML reads unquoted 06/07 as ints (octal), dropping the zero padding
    # that the S3 day prefixes carry.
    if isinstance(val, bool):
        raise ConfigurationError(f"Invalid partition day: {val!r}")
    if isinstance(val, int):
        return f"{val:02d}"
    if isinstance(val, str) and val.strip():
        return val.strip()
    raise ConfigurationError(f"Invalid partition day: {val!r}")

@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    log_file: str

    # day | hour
    variant: str

    # Athena database
    database_name: str
    results_bucket: str
    force_destroy: bool

    # WAF log table
    table_name: str
    log_bucket: str
    log_prefix: str
    partition_days: List[str]

    # Partition projection (hour variant)
    projection_range_start: str
    projection_format: str
    projection_interval: int
    projection_interval_unit: str

    # Detection query
    register_uri: str
    register_method: str
    request_threshold: int
    window_start: str
    window_end: str

    # Saved-query runner
    aws_region: str
    athena_workgroup: str
    athena_output_location: str

def load_settings() -> Settings:
    app_env = _env("APP_ENV", "dev")
    cfg_path = Path("config") / f"{app_env}.yaml"
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config not found: {cfg_path}")

    cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}

    app_cfg = cfg.get("app") or {}
    variant = (_env("WAF_VARIANT", str(app_cfg.get("variant", "day"))) or "day").strip().lower()
    if variant not in VARIANTS:
        raise ConfigurationError(f"Unknown variant '{variant}', expected one of {VARIANTS}")

    db_cfg = cfg.get("database") or {}
    database_name = _env("ATHENA_DATABASE", str(db_cfg.get("name", "prod_waf_logs")))
    results_bucket = _env("ATHENA_RESULTS_BUCKET", str(db_cfg.get("results_bucket", "")))
    force_destroy = _env_bool("ATHENA_FORCE_DESTROY", bool(db_cfg.get("force_destroy", True)))

    tbl_cfg = cfg.get("table") or {}
    table_name = _env("WAF_TABLE_NAME", str(tbl_cfg.get("name", "waf_prod_acquisition_logs")))
    log_bucket = _env("WAF_LOG_BUCKET", str(tbl_cfg.get("log_bucket", "")))
    log_prefix = _env("WAF_LOG_PREFIX", str(tbl_cfg.get("log_prefix", ""))).strip("/")
    partition_days = _env_list(
        "WAF_PARTITION_DAYS", [_day(d) for d in tbl_cfg.get("partition_days", ["16", "17", "18"])]
    )

    proj_cfg = tbl_cfg.get("projection") or {}
    projection_range_start = _env("WAF_PROJECTION_START", str(proj_cfg.get("range_start", "2021/10/16/00")))
    projection_format = str(proj_cfg.get("format", "yyyy/MM/dd/HH"))
    projection_interval = int(_env("WAF_PROJECTION_INTERVAL", str(proj_cfg.get("interval", 1))))
    projection_interval_unit = str(proj_cfg.get("interval_unit", "HOURS"))

    q_cfg = cfg.get("detection") or {}
    window = q_cfg.get("window") or {}

    run_cfg = cfg.get("runner") or {}

    return Settings(
        env=app_env,
        log_level=_env("LOG_LEVEL", str(app_cfg.get("log_level", "INFO"))),
        log_file=_env("LOG_FILE", str(app_cfg.get("log_file", "logs/waf_analytics.log"))),
        variant=variant,
        database_name=database_name,
        results_bucket=results_bucket,
        force_destroy=force_destroy,
        table_name=table_name,
        log_bucket=log_bucket,
        log_prefix=log_prefix,
        partition_days=partition_days,
        projection_range_start=projection_range_start,
        projection_format=projection_format,
        projection_interval=projection_interval,
        projection_interval_unit=projection_interval_unit,
        register_uri=_env("WAF_REGISTER_URI", str(q_cfg.get("uri", "/api/2/register"))),
        register_method=_env("WAF_REGISTER_METHOD", str(q_cfg.get("method", "POST"))),
        request_threshold=int(_env("WAF_REQUEST_THRESHOLD", str(q_cfg.get("threshold", 10)))),
        window_start=_env("WAF_WINDOW_START", str(window.get("start", "2021/10/16"))),
        window_end=_env("WAF_WINDOW_END", str(window.get("end", "2021/10/19"))),
        aws_region=_env("AWS_REGION", str(run_cfg.get("region", ""))) or "",
        athena_workgroup=_env("ATHENA_WORKGROUP", str(run_cfg.get("workgroup", ""))) or "",
        athena_output_location=_env("ATHENA_OUTPUT_LOCATION", str(run_cfg.get("output_location", ""))) or "",
    )
