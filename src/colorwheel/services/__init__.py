"""Services used by the card."""

from .commit_service import FALLBACK_SERVICE, PRIMARY_SERVICE, CommitService

__all__ = ["FALLBACK_SERVICE", "PRIMARY_SERVICE", "CommitService"]
