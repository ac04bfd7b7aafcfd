import pytest

from resource_downloader.core.exceptions import DownloaderNotFoundError
from resource_downloader.domain.entities.resource_downloader import ResourceDownloader


pytestmark = pytest.mark.unit


@pytest.mark.asyncio
async def test_get_missing_downloader_raises_not_found(memory_repository):
    with pytest.raises(DownloaderNotFoundError):
        await memory_repository.get("user1")


@pytest.mark.asyncio
async def test_save_then_get(memory_repository):
    downloader = ResourceDownloader(user_id="user1", resources=["a"], limit=3)

    await memory_repository.save(downloader)

    assert await memory_repository.get("user1") == downloader


@pytest.mark.asyncio
async def test_save_overwrites_previous_state(memory_repository):
    await memory_repository.save(ResourceDownloader(user_id="user1", resources=["a"], limit=3))
    await memory_repository.save(ResourceDownloader(user_id="user1", resources=["a", "b"], limit=3))

    stored = await memory_repository.get("user1")

    assert stored.resources == ["a", "b"]


@pytest.mark.asyncio
async def test_loaded_downloader_does_not_share_state(memory_repository):
    await memory_repository.save(ResourceDownloader.new("user1", limit=3))

    loaded = await memory_repository.get("user1")
    loaded.register_download("a")

    assert (await memory_repository.get("user1")).resources == []
