class RecordBrowserError(Exception):
    """Base exception for all record_browser errors"""
    pass

class ConfigError(RecordBrowserError):
    """Invalid or inconsistent global.json / environment settings"""
    pass

class TransportError(RecordBrowserError):
    """
    Backend call failed: connection error, non-2xx status or a body
    that could not be decoded into records
    """
    pass
