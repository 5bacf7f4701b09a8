from __future__ import annotations

import pulumi

CONSOLE_QUERY_URI = "https://{region}.console.aws.amazon.com/athena/home?force#query/saved/{query_id}"


def query_uri(query_id: str, region: str) -> str:
    """Deep-link to a saved Athena query in the AWS console."""
    return CONSOLE_QUERY_URI.format(region=region, query_id=query_id)


def configured_region() -> str:
    """``aws:region`` from the stack config; raises ConfigMissingError when unset."""
    return pulumi.Config("aws").require("region")
