class ClinicError(Exception):
    """Base class for errors raised inside the clinic backend."""


class InvariantViolation(ClinicError):
    """A domain rule was broken by the data being written."""


class ValidationError(ClinicError):
    """A required field is missing or a field is not allowed."""


class QueryError(ClinicError):
    """The backing store failed to answer a read."""


class UploadError(ClinicError):
    """An image could not be stored in the content bucket."""


class SessionParseError(ClinicError):
    """The persisted admin session record could not be decoded."""


class BlockStoreError(ClinicError):
    """A page-block read or write failed."""
