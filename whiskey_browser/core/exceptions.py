class WhiskeyBrowserError(Exception):
    """Base exception for all whiskey_browser errors"""
    pass

class ConfigError(WhiskeyBrowserError):
    """Invalid or inconsistent global.json or collection config"""
    pass

class CollectionLoadError(WhiskeyBrowserError):
    """Collection file is missing, unreadable or not a JSON array of records"""
    pass

class RecordSchemaError(WhiskeyBrowserError):
    """
    A record cannot be keyed: missing or non-integer id,
    or the same id appears twice in one collection
    """
    pass

class UnknownDimensionError(WhiskeyBrowserError, KeyError):
    """Name passed to FilterState.set_dimension is not a filter dimension"""
    pass

class UnknownColumnError(WhiskeyBrowserError, KeyError):
    """Column passed to the sort comparator is not sortable"""
    pass
