"""Authenticated session model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserSession:
    user_id: str
    email: str | None = None


__all__ = ["UserSession"]
