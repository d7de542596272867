class PdfCollectorError(Exception):
    """Base error for the project."""

class FilesystemError(PdfCollectorError):
    """A path could not be listed, read, written or created."""

class ConfigError(PdfCollectorError):
    pass
