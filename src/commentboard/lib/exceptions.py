"""
Exception Hierarchy

Custom exceptions for the comment board. Validation problems are not
represented here: they are returned to callers as data.
"""


class CommentBoardException(Exception):
    """Base exception for the comment board"""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# Persistence Exceptions
class PersistenceException(CommentBoardException):
    """Exception when the record store cannot be read or written"""
    pass


class StoreReadException(PersistenceException):
    """Exception when the record store file cannot be read"""
    pass


class CorruptStoreException(StoreReadException):
    """Exception when stored data is malformed"""
    pass


class StoreWriteException(PersistenceException):
    """Exception when the record store file cannot be written"""
    pass


# Cache Exceptions
class CacheException(CommentBoardException):
    """Exception when the invalidation signal cannot be delivered"""
    pass


# Utility functions
def format_exception_details(exception: CommentBoardException) -> str:
    """
    Format exception details for logging

    Args:
        exception: Comment board exception instance

    Returns:
        Formatted string with exception details
    """
    details_str = f"{exception.__class__.__name__}: {exception.message}"

    if exception.details:
        details_list = [f"  {k}: {v}" for k, v in exception.details.items()]
        details_str += "\nDetails:\n" + "\n".join(details_list)

    return details_str


def wrap_exception(original_exception: Exception, context: str,
                   exception_class: type = CommentBoardException) -> CommentBoardException:
    """
    Wrap a generic exception in a comment board exception

    Args:
        original_exception: Original exception
        context: Context describing where the exception occurred
        exception_class: Subclass of CommentBoardException to build

    Returns:
        Wrapped exception
    """
    message = f"{context}: {str(original_exception)}"
    details = {
        'original_exception': original_exception.__class__.__name__,
        'original_message': str(original_exception)
    }

    return exception_class(message, details)
