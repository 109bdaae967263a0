"""
Domain errors.

Services raise these; the API layer translates them into HTTP
responses using the status_code each class carries. They
subclass ValueError so callers that only care about "the
request was rejected" can catch them uniformly.
"""


class ExpenseTrackerError(ValueError):
    status_code = 500


class ValidationError(ExpenseTrackerError):
    """Malformed or missing input."""
    status_code = 400


class Unauthorized(ExpenseTrackerError):
    """Missing, invalid or expired session."""
    status_code = 401


class InvalidCredentials(Unauthorized):
    """
    Login failed.

    The message is fixed so an unknown email and a wrong
    password produce exactly the same response.
    """

    def __init__(self):
        super().__init__("Invalid credentials")


class Forbidden(ExpenseTrackerError):
    """Authenticated, but the account lacks the required role."""
    status_code = 403


class Conflict(ExpenseTrackerError):
    """A unique key is already taken."""
    status_code = 409
