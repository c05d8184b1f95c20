# app/errors.py
class RecordError(Exception):
    """Base class for errors raised by the record layer."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RecordError):
    """Missing or invalid field; the caller can fix the payload."""
    status_code = 400


class NotFoundError(RecordError):
    status_code = 404


class UpstreamError(RecordError):
    """Datastore or blob store call failed; message comes from the underlying system."""
    status_code = 502
