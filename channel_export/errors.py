"""Exceptions raised by the channel export service."""


class ChannelExportError(Exception):
    """Base class for channel export failures."""
    pass


class RetrievalError(ChannelExportError):
    """Exception raised when a YouTube API lookup fails."""
    pass


class ExportError(ChannelExportError):
    """Exception raised when the CSV file cannot be written."""
    pass
