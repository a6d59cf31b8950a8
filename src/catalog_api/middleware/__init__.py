from .auth import CurrentUserId, verify_token

__all__ = ["CurrentUserId", "verify_token"]
