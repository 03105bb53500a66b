

class PostBrowserError(Exception):
    """Base exception for all post_browser errors"""
    pass

class ConfigError(PostBrowserError):
    """Invalid or inconsistent global.json or environment override"""
    pass

class RecordSchemaError(PostBrowserError):
    """
    A record payload doesn't match what Record expects
    missing keys, wrong types, etc
    """
    pass

class DataSourceUnavailable(PostBrowserError):
    """
    The external record read failed (network, non-2xx status, malformed payload).
    Terminal for the current session.
    """
    pass
