from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Any, Dict
import time

import boto3
from botocore.exceptions import ClientError
import pandas as pd

from waf_analytics.config.settings import Settings
from waf_analytics.exceptions.errors import QueryExecutionError
from waf_analytics.logging.logger import get_logger
from waf_analytics.db.utils import parse_s3_uri


log = get_logger("db.athena")

TERMINAL_STATES = {"SUCCEEDED", "FAILED", "CANCELLED"}


@dataclass
class AthenaQueryRunner:
    settings: Settings
    poll_interval: float = 0.5
    max_polls: int = 240

    def _client(self, service: str):
        return boto3.client(service, region_name=self.settings.aws_region or None)

    def run_named_query(self, named_query_id: str) -> pd.DataFrame:
        """Execute a saved query by id and return its result rows.

        The query text and database come from the named query itself; the
        output location and workgroup come from settings. AWS API errors
        (unknown id, access denied, missing result object) surface as
        QueryExecutionError.
        """
        try:
            return self._run(named_query_id)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "ClientError")
            raise QueryExecutionError(f"Athena saved query {named_query_id}: {code}: {e}") from e

    def _run(self, named_query_id: str) -> pd.DataFrame:
        s = self.settings
        if not s.athena_output_location:
            raise QueryExecutionError("ATHENA_OUTPUT_LOCATION is required to run saved queries")

        ath = self._client("athena")
        named = ath.get_named_query(NamedQueryId=named_query_id)["NamedQuery"]

        start_args: Dict[str, Any] = {
            "QueryString": named["QueryString"],
            "QueryExecutionContext": {"Database": named["Database"]},
            "ResultConfiguration": {"OutputLocation": s.athena_output_location},
        }
        workgroup = s.athena_workgroup or named.get("WorkGroup")
        if workgroup:
            start_args["WorkGroup"] = workgroup

        log.info(
            "Athena start_query_execution",
            extra={
                "named_query_id": named_query_id,
                "query_name": named.get("Name", ""),
                "database": named["Database"],
                "workgroup": workgroup,
            },
        )
        qid = ath.start_query_execution(**start_args)["QueryExecutionId"]

        state = "QUEUED"
        reason = ""
        resp: Dict[str, Any] = {}
        for _ in range(self.max_polls):
            resp = ath.get_query_execution(QueryExecutionId=qid)
            status = resp.get("QueryExecution", {}).get("Status", {})
            state = status.get("State", "")
            reason = status.get("StateChangeReason", "") or ""
            if state in TERMINAL_STATES:
                break
            time.sleep(self.poll_interval)

        if state != "SUCCEEDED":
            raise QueryExecutionError(f"Athena query {qid} {state or 'TIMED OUT'}: {reason}")

        out_loc = (
            resp.get("QueryExecution", {})
            .get("ResultConfiguration", {})
            .get("OutputLocation", "")
        )
        if not out_loc:
            out_loc = s.athena_output_location.rstrip("/") + f"/{qid}.csv"

        bucket, key = parse_s3_uri(out_loc)
        body = self._client("s3").get_object(Bucket=bucket, Key=key)["Body"].read()

        df = pd.read_csv(BytesIO(body))
        log.info("Athena query finished", extra={"query_execution_id": qid, "rows": len(df)})
        return df
