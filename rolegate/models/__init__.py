"""Data models."""

from rolegate.models.user import UserRecord

__all__ = ["UserRecord"]
