from typing import BinaryIO, Protocol


class FileSystem(Protocol):
    """Opens local files for upload."""

    def open(self, path: str) -> BinaryIO:
        ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def open(self, path: str) -> BinaryIO:
        return open(path, "rb")
