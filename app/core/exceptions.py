"""Custom exceptions for the application."""

from fastapi import status


class ApplicationError(Exception):
    """Base exception for application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when request input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class UploadError(ValidationError):
    """Raised when an uploaded file is rejected."""


class DuplicateEmailError(ApplicationError):
    """Raised when registering a company with an email already in use."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, email: str):
        self.email = email
        super().__init__("A company with this email already exists.")


class DuplicateApplicationError(ApplicationError):
    """Raised when attempting to apply to an already applied job."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, job_id: str, user_id: str):
        self.job_id = job_id
        self.user_id = user_id
        super().__init__("You have already applied for this job.")


class AuthenticationError(ApplicationError):
    """Raised when a credential is missing, invalid or expired."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "Authentication failed", reason: str = "invalid"):
        self.detail = detail
        self.reason = reason
        super().__init__(detail)


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not match.

    The message never tells whether the email or the password was wrong.
    """

    def __init__(self):
        super().__init__("Invalid credentials.", reason="credentials")


class ForbiddenError(ApplicationError):
    """Raised when the caller is authenticated but does not own the resource."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Not authorized."):
        super().__init__(message)


class NotFoundError(ApplicationError):
    """Raised when a referenced entity is absent or not visible."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Resource not found."):
        super().__init__(message)


class IdentityProviderError(ApplicationError):
    """Raised when the identity provider API fails unexpectedly."""

    def __init__(self, status_code: int, detail: str):
        self.upstream_status = status_code
        self.detail = detail
        super().__init__(f"Identity provider error ({status_code}): {detail}")


class BlobStorageError(ApplicationError):
    """Raised when an upload to blob storage fails."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Blob storage error: {detail}")
