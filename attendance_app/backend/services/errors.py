# --- Service layer exception classes ---

class ServiceError(Exception):
    """General exception class for the service layer."""
    pass

class InvalidArgumentError(ServiceError):
    """Caller-supplied data failed a precondition (missing name, bad status, bad date)."""
    pass

class NotFoundError(ServiceError):
    """The referenced student does not exist."""
    pass

class StorageError(ServiceError):
    """The persistence layer failed unexpectedly. The message is safe to show to callers."""
    pass
