from .errors import OutOfRangeError, UnsupportedOperationError
