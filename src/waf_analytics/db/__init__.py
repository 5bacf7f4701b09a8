"""Running saved queries against Athena.

The stack only declares named queries; this package executes one on demand
and reads the CSV Athena writes to the results location.
"""
