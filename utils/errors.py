"""
utils/errors.py
-----------------
Failures raised by the services. Controllers turn a ServiceError into
its status code; anything else becomes a 500.
"""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None, errors=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.errors = errors

    def to_dict(self):
        body = {"status": False, "message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationFailure(ServiceError):
    status_code = 400


class DuplicateEmail(ServiceError):
    status_code = 400


class NotFound(ServiceError):
    status_code = 404


class InvalidCredentials(ServiceError):
    status_code = 400


class TokenError(Exception):
    """Signing or decoding a bearer token failed."""
