from .fs import FileSystem, LocalFileSystem
from .logger import get_logger

__all__ = ['FileSystem', 'LocalFileSystem', 'get_logger']
