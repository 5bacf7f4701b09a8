from __future__ import annotations
import sys
from pathlib import Path as _Path

_ROOT = _Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

import argparse

from waf_analytics.config.settings import load_settings
from waf_analytics.db.athena import AthenaQueryRunner
from waf_analytics.exceptions.errors import QueryExecutionError
from waf_analytics.logging.logger import init_logging, get_logger

log = get_logger("scripts.run_saved_query")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Run a saved Athena query and print its rows.")
    ap.add_argument("named_query_id", help="Named query id (the last path segment of the console URI)")
    ap.add_argument("--output", default="", help="Optional CSV path to write the results to")
    ap.add_argument("--max-rows", type=int, default=50, help="Rows to print")
    args = ap.parse_args(argv)

    settings = load_settings()
    init_logging(settings.log_level, settings.log_file)

    try:
        df = AthenaQueryRunner(settings).run_named_query(args.named_query_id)
    except QueryExecutionError as e:
        log.error("Saved query failed: %s", e)
        return 1

    if args.output:
        _Path(args.output).parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(args.output, index=False)
        log.info("Wrote results", extra={"path": args.output, "rows": len(df)})

    print(df.head(args.max_rows).to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
