# core/errors.py
"""Error taxonomy shared by the service layer.

Every error carries a human-readable ``message`` that is safe to show to the
end user, and the HTTP-style ``status_code`` a web layer would answer with.
"""


class AppError(Exception):
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid input"


class MissingFields(ValidationError):
    default_message = "Missing required fields"


class InvalidQuantity(ValidationError):
    default_message = "Quantity must be between 1 and 5"


class EmptyCart(ValidationError):
    default_message = "Your cart is empty"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    status_code = 409
    default_message = "Conflict"


class DuplicateEmail(ConflictError):
    default_message = "User with this email already exists"


class AuthError(AppError):
    status_code = 401
    default_message = "Not authenticated"


class InvalidCredentials(AuthError):
    default_message = "Invalid email or password"


class Unauthenticated(AuthError):
    default_message = "Not authenticated"


class InternalError(AppError):
    status_code = 500
    default_message = "Something went wrong"
