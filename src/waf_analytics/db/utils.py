from __future__ import annotations

from typing import Tuple
import re


def parse_s3_uri(uri: str) -> Tuple[str, str]:
    """Parse s3://bucket/key -> (bucket, key)."""
    m = re.match(r"^s3://([^/]+)/(.+)$", (uri or "").strip())
    if not m:
        raise ValueError(f"Invalid S3 URI: {uri}")
    return m.group(1), m.group(2)
