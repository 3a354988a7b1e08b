class MissionCacheError(Exception):
    """Base class for failures inside the daily mission pipeline."""


class FetchError(MissionCacheError):
    """The mission agent could not be reached or returned no usable mission."""


class StorageError(MissionCacheError):
    """Reading from or writing to the mission store failed."""
