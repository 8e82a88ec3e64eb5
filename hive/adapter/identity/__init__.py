"""Identity provider adapters."""

from .firebase import FirebaseIdentityVerifier
from .mock import MockIdentityVerifier

__all__ = ["FirebaseIdentityVerifier", "MockIdentityVerifier"]
