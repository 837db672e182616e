from fastapi import HTTPException, status

from ...services.errors import ServiceError, InvalidArgumentError, NotFoundError


def to_http_exception(error: ServiceError) -> HTTPException:
    """Maps a service layer error onto the HTTP status the API documents for it."""
    if isinstance(error, InvalidArgumentError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    # StorageError messages are written to be generic; driver details only reach the logs.
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
