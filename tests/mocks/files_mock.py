import errno
import os
from typing import Dict, List, Tuple

from backlight_control.exceptions import BacklightIOError
from backlight_control.helpers import FileAccess, parse_integer


class MemoryFiles(FileAccess):
    '''
    Keeps sysfs attribute contents in a dict instead of on disk.

    Paths that were never populated behave like missing files and paths in
    `read_only` refuse writes the way a root-owned sysfs file would.
    '''
    def __init__(self, contents: Dict[str, str] = None):
        self.contents: Dict[str, str] = dict(contents or {})
        self.read_only = set()
        self.writes: List[Tuple[str, str]] = []

    def read_integer(self, path: str) -> int:
        if path not in self.contents:
            raise BacklightIOError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        return parse_integer(self.contents[path], source=path)

    def write_integer(self, path: str, value: int):
        if path in self.read_only:
            raise BacklightIOError(errno.EACCES, os.strerror(errno.EACCES), path)
        if path not in self.contents:
            raise BacklightIOError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        self.contents[path] = str(value)
        self.writes.append((path, str(value)))
