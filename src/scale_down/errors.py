"""Domain errors and their HTTP status mapping."""


class ScaleDownError(Exception):
    """Base class for errors reported back to the caller.

    Attributes:
        message: human-readable message, sent as the response ``detail``
        http_status: status code used by the API exception handler
    """

    http_status = 500
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidRequestError(ScaleDownError):
    """Raised when request parameters are unusable."""

    http_status = 400
    default_message = "Request parameter(s) invalid"


class InvalidDateParameterError(InvalidRequestError):
    """Raised when a date query parameter fails the format check."""

    default_message = (
        "Date parameter error - typically invalid date format. Should be YYYY-MM-DD"
    )


class ConflictingDateParametersError(InvalidRequestError):
    """Raised when date query parameters are combined in an unsupported way."""

    default_message = (
        "Too many options specified at once. "
        "Can only send just 'date' or both 'startDate' and 'endDate'"
    )


class UnauthorizedError(ScaleDownError):
    """Raised when the caller is not authenticated."""

    http_status = 401
    default_message = "Not Authorized"


class ForbiddenError(ScaleDownError):
    """Raised when credentials are present but wrong."""

    http_status = 403
    default_message = "Forbidden"


class NotFoundError(ScaleDownError):
    """Raised when a requested resource does not exist."""

    http_status = 404
    default_message = "Not found"


class FoodItemNotFoundError(NotFoundError):
    default_message = "Food not found"


class MealNotFoundError(NotFoundError):
    default_message = "Meal not found"


class UserNotFoundError(NotFoundError):
    default_message = "User not found"


class RecentFoodsNotFoundError(NotFoundError):
    default_message = (
        "Recent Foods not found, user has never created a meal. "
        "They are automatically tracked when users create/edit meals"
    )


class ConflictError(ScaleDownError):
    """Raised when a unique value is already taken."""

    http_status = 409
    default_message = "Conflict"


class FoodNameTakenError(ConflictError):
    default_message = "Food name is taken"


class UserNameTakenError(ConflictError):
    default_message = "Username is taken"
