from .user_service_client import HttpUserServiceClient

__all__ = ["HttpUserServiceClient"]
