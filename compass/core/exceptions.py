"""
Custom Exceptions - Capital Compass
compass/core/exceptions.py

The batch pipeline never raises for malformed data; these exceptions cover
the narrative collaborator boundary and request-level problems only.
"""


class CompassException(Exception):
    """Base exception for Capital Compass."""

    pass


class NarrativeUnavailableError(CompassException):
    """The generative-text collaborator could not produce a usable answer."""

    def __init__(self, message: str = "Narrative service unavailable"):
        self.message = message
        super().__init__(message)


class MissingCredentialsError(NarrativeUnavailableError):
    """No API key configured for the generative-text collaborator."""

    def __init__(self, provider: str = "anthropic"):
        self.provider = provider
        super().__init__(f"API key for {provider} not found")


class EmptyUploadError(CompassException):
    """An analysis request arrived without any file content."""

    def __init__(self, message: str = "At least one CSV file is required"):
        self.message = message
        super().__init__(message)
