from .download_service import DownloadService

__all__ = ["DownloadService"]
