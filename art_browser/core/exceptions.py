class ArtBrowserError(Exception):
    """Base exception for all art_browser errors"""
    pass


class ConfigError(ArtBrowserError):
    """Invalid or inconsistent global.json"""
    pass


class DatasetLoadError(ArtBrowserError):
    """The dataset file could not be read at start-up"""
    pass


class DatasetSchemaError(ArtBrowserError):
    """
    The dataset file was read but doesn't match what the browser expects:
    missing header columns, no header row, etc
    """
    pass
