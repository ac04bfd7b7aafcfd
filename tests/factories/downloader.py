from __future__ import annotations

"""Factory for generating fake downloader data for testing."""

from typing import List, Optional

from faker import Faker

from resource_downloader.domain.entities.resource_downloader import ResourceDownloader
from resource_downloader.domain.value_objects.user_limit import UserLimit

fake = Faker()


def create_fake_downloader(
    user_id: Optional[str] = None,
    resources: Optional[List[str]] = None,
    limit: Optional[int] = None,
) -> ResourceDownloader:
    """Create a fake ResourceDownloader entity for testing.

    Args:
        user_id (Optional[str]): User ID, defaults to a random UUID string.
        resources (Optional[List[str]]): Downloaded resources, defaults to empty.
        limit (Optional[int]): Download limit, defaults to room for a few more
            downloads than already registered.

    Returns:
        ResourceDownloader: A valid downloader entity.
    """
    resources = list(resources) if resources is not None else []
    if limit is None:
        limit = len(resources) + fake.random_int(min=1, max=10)
    return ResourceDownloader(
        user_id=user_id or fake.uuid4(),
        resources=resources,
        limit=limit,
    )


def create_fake_user_limit(user_id: Optional[str] = None, limit: Optional[int] = None) -> UserLimit:
    """Create a fake UserLimit as returned by the user-limit service."""
    return UserLimit(
        user_id=user_id or fake.uuid4(),
        limit=limit if limit is not None else fake.random_int(min=1, max=100),
    )
