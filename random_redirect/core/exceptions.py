"""
Custom Exceptions

This module defines the error kinds raised while sanitizing settings,
persisting redirect lists and maintaining shortlinks.

Sanitization errors are recoverable: the submission service catches them
per list, records the message and moves on to the next list.
"""


class RandomRedirectException(Exception):
    """Base exception for the random redirect service."""
    pass


class InvalidKeywordError(RandomRedirectException):
    """Raised when a keyword is malformed or empty after normalization."""

    def __init__(self, keyword, reason: str = "Invalid or empty keyword"):
        self.keyword = keyword
        self.reason = reason
        super().__init__(f"{reason}: '{keyword}'")


class EmptyListError(RandomRedirectException):
    """Raised when no valid URL survives sanitization."""

    def __init__(self, keyword: str = ""):
        self.keyword = keyword
        super().__init__(f"No valid URLs provided for keyword '{keyword}'")


class DuplicateKeywordError(RandomRedirectException):
    """Raised when one submission produces two lists under the same keyword."""

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"Keyword '{keyword}' is used multiple times in this submission")


class KeywordNotFoundError(RandomRedirectException):
    """Raised when no redirect list is stored under a keyword."""

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"Redirect list for keyword '{keyword}' not found")


class ShortlinkError(RandomRedirectException):
    """Raised when a shortlink cannot be created or updated."""

    def __init__(self, keyword: str, reason: str):
        self.keyword = keyword
        self.reason = reason
        super().__init__(f"Shortlink '{keyword}': {reason}")


class DatabaseError(RandomRedirectException):
    """Raised when database operations fail."""

    def __init__(self, message: str, original_error: Exception = None):
        self.original_error = original_error
        super().__init__(f"Database error: {message}")
