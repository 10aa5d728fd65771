"""
Core Package - Capital Compass
compass/core/__init__.py

Core infrastructure: dependencies, exceptions, logging.
"""

from compass.core.exceptions import (
    CompassException,
    EmptyUploadError,
    MissingCredentialsError,
    NarrativeUnavailableError,
)

__all__ = [
    "CompassException",
    "EmptyUploadError",
    "MissingCredentialsError",
    "NarrativeUnavailableError",
]
