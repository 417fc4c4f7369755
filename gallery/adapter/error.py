"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class IdentityProviderError(ProviderError):
    """Identity provider rejected a request or could not be reached."""

    pass
