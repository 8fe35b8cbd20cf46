from abc import ABC, abstractmethod


class IFileStorage(ABC):
    """Stores uploaded document files"""

    @abstractmethod
    async def save(self, content: bytes, original_file_name: str) -> str:
        """Persist content, returns the stored file path"""
        pass

    @abstractmethod
    async def delete(self, file_path: str) -> bool:
        """Remove a stored file, False if it did not exist"""
        pass

    @abstractmethod
    def exists(self, file_path: str) -> bool:
        pass
