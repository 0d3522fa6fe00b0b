"""Exception types raised by the category admin controllers and API client."""


class CategoryAdminError(Exception):
    """Base class for all category admin errors"""
    pass


class ConfigurationError(CategoryAdminError):
    """Raised when a category kind has no registered configuration"""
    pass


class ApiError(CategoryAdminError):
    """A request to the backend failed.

    ``message`` is the server-provided ``message`` field when the response
    body carried one, otherwise None.
    """

    def __init__(self, description, status_code=None, message=None):
        super().__init__(description)
        self.status_code = status_code
        self.message = message


class FetchError(ApiError):
    pass


class SubmitError(ApiError):
    pass


class DeleteError(ApiError):
    pass


class ValidationError(CategoryAdminError):
    """A category name was rejected before any request was made"""
    pass


class EmptyNameError(ValidationError):
    pass


class TooShortError(ValidationError):
    pass


class TooLongError(ValidationError):
    pass


class InvalidCharactersError(ValidationError):
    pass
