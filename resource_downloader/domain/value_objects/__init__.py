from .user_limit import UserLimit

__all__ = ["UserLimit"]
