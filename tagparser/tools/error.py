class TagParserError(Exception):
    """Base class of every error raised by the tag parser core."""
    def __init__(self, message="unable to parse given data"):
        super().__init__(message)


class InvalidDataError(TagParserError):
    """Raised when data is malformed: a reserved bit is set, a sync word mismatches or a bound is violated."""
    def __init__(self, message="data to be parsed or to be made seems to be invalid"):
        super().__init__(message)


class TruncatedDataError(InvalidDataError):
    """Returned if an attempt is made to read from a reader that has been depleted."""
    def __init__(self, message="data to be parsed seems to be truncated"):
        super().__init__(message)


class NoDataFoundError(TagParserError):
    def __init__(self, message="unable to find requested data"):
        super().__init__(message)


class ConversionError(TagParserError):
    """Raised when a tag value can not be converted without losing its value."""
    def __init__(self, message="unable to convert the assigned value"):
        super().__init__(message)


class NotImplementedFeatureError(TagParserError):
    """Raised for syntactically valid data using a feature which is not supported."""
    def __init__(self, message="the requested operation is not implemented"):
        super().__init__(message)


class OperationAbortedError(TagParserError):
    def __init__(self, message="the operation has been aborted"):
        super().__init__(message)
