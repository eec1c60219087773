class FileSelectionError(Exception):
    """Base exception for rejected file selections."""


class NoFileSelectedError(FileSelectionError):
    """Raised when an upload is requested without a selected file."""


class UnsupportedFileTypeError(FileSelectionError):
    """Raised when the file extension is not in the accepted list."""


class FileTooLargeError(FileSelectionError):
    """Raised when the file exceeds the configured upload size ceiling."""
