class WafAnalyticsError(Exception):
    """Base exception for waf_analytics."""

class ConfigurationError(WafAnalyticsError):
    pass

class QueryExecutionError(WafAnalyticsError):
    pass
