"""Athena statement builders for WAF logs.

Every builder returns plain SQL text. Nothing is validated locally; a
malformed statement only fails once Athena runs the saved query.

Two table layouts are supported:
  - day  : explicit ``day`` partitions, maintained with ALTER TABLE
  - hour : ``datehour`` partition projection, no maintenance needed
"""
