"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class ConflictError(DomainError):
    """Raised when an operation would violate a uniqueness rule."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class InvalidInvitationCodeError(NotFoundError):
    """Raised when no invitation matches a code."""

    def __init__(self, masked_code: str):
        super().__init__("Invitation", masked_code, "Invalid invitation code")


class NotAuthenticatedError(DomainError):
    """Raised when an operation requires a signed-in caller."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when the caller may not act on a resource."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class AdminAccessRequiredError(NotAuthorizedError):
    """Raised by the admin guard for non-admin callers."""

    def __init__(self):
        super().__init__("Unauthorized: Admin access required")


class InvitationAlreadyUsedError(DomainError):
    """Raised when redeeming an invitation whose code was already used."""

    def __init__(self):
        super().__init__("This invitation has already been used")


class InvitationExpiredError(DomainError):
    """Raised when redeeming an invitation past its expiry."""

    def __init__(self):
        super().__init__("This invitation has expired")


class InvitationEmailMismatchError(DomainError):
    """Raised when the signed-in email differs from the invited email."""

    def __init__(self):
        super().__init__("This invitation was issued to a different email address")


class CodeAllocationError(DomainError):
    """Raised when no unused invitation code could be drawn."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Could not allocate a unique invitation code after {attempts} attempts"
        )
