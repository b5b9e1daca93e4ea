class SkyMapError(Exception):
    pass


class DataUnavailable(SkyMapError):
    """constellation or body data failed to load or parse"""


class PositionUnavailable(SkyMapError):
    """observer location could not be determined"""
