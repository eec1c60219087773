class ClipboardError(Exception):
    """Raised when text cannot be placed on the system clipboard."""
