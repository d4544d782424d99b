from typing import Optional


def format_exc(e: Exception) -> str:
    '''@private'''
    return f'{type(e).__name__}: {e}'


class BacklightError(Exception):
    '''
    Generic error class designed to make catching errors under one umbrella easy.
    '''
    ...


class BacklightIOError(BacklightError, OSError):
    '''
    A sysfs file could not be opened, read or written.

    Raised from the underlying `OSError`, so `errno`, `strerror` and `filename`
    are carried across. Common causes are a device name that does not exist under
    the sysfs root (`ENOENT`) or missing write permission on `brightness` (`EACCES`).

    Example:
        ```python
        try:
            open('/sys/class/backlight/nope/brightness')
        except OSError as e:
            raise BacklightIOError.from_os_error(e) from e
        ```
    '''
    @classmethod
    def from_os_error(cls, exc: OSError) -> 'BacklightIOError':
        if exc.errno is None:
            return cls(str(exc))
        return cls(exc.errno, exc.strerror, exc.filename)


class BacklightParseError(BacklightError, ValueError):
    '''The contents of a sysfs file are not a non-negative integer'''
    def __init__(self, message: str, path: Optional[str] = None, content: Optional[str] = None):
        self.path = path
        self.content = content
        super().__init__(message)


class BacklightDivisionError(BacklightError, ZeroDivisionError):
    '''`max_brightness` reads as zero so no percentage can be derived'''
    ...
