"""Pulumi program: Athena database and saved queries over WAF logs."""
from __future__ import annotations
import sys
from pathlib import Path as _Path

_SRC = _Path(__file__).resolve().parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

import pulumi

from waf_analytics.config.settings import load_settings
from waf_analytics.logging.logger import init_logging
from waf_analytics.infra.stack import declare_waf_stack

settings = load_settings()
init_logging(settings.log_level, settings.log_file)

for export_name, uri in declare_waf_stack(settings).items():
    pulumi.export(export_name, uri)
