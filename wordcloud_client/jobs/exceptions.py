class ResultValidationError(Exception):
    """Raised when a status or result payload does not match the job data model."""
