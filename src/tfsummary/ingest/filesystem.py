"""Filesystem access used by the input validator and plan reader."""

import os
import stat
from abc import ABC, abstractmethod


class FileSystemAdapter(ABC):
    """
    Abstract filesystem capability.
    
    Implementations raise the standard OSError subclasses
    (FileNotFoundError, PermissionError, ...) so callers can classify them.
    """
    
    @abstractmethod
    def is_file(self, path: str) -> bool:
        """
        Stat a path and report whether it is a regular file.
        
        Raises:
            OSError: If the path cannot be stat'ed
        """
        pass
    
    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a file as UTF-8 text.
        
        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the content is not valid UTF-8
        """
        pass


class LocalFileSystem(FileSystemAdapter):
    """FileSystemAdapter backed by the local disk."""
    
    def is_file(self, path: str) -> bool:
        return stat.S_ISREG(os.stat(path).st_mode)
    
    def read_text(self, path: str) -> str:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
