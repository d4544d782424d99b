'''
Helper functions for the library
'''
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Callable, Optional, Union

from .exceptions import (BacklightDivisionError, BacklightIOError,  # noqa:F401
                         BacklightParseError, format_exc)
from .types import IntPercentage, Percentage, RawBrightness

_logger = logging.getLogger(__name__)


class FileAccess(ABC):
    '''
    The capability a `Brightness` instance uses to talk to the sysfs files.

    `SysFiles` does real file I/O. Tests can swap in an implementation that
    keeps the values in memory instead.
    '''
    @abstractmethod
    def read_integer(self, path: str) -> int:
        '''
        Args:
            path: the file to read

        Returns:
            The integer contained in the file

        Raises:
            BacklightIOError: if the file cannot be opened or read
            BacklightParseError: if the contents are not a non-negative integer
        '''
        ...

    @abstractmethod
    def write_integer(self, path: str, value: int):
        '''
        Args:
            path: the file to write
            value: written as a bare decimal string, without a trailing newline

        Raises:
            BacklightIOError: if the file cannot be opened or written
        '''
        ...


class SysFiles(FileAccess):
    '''
    Reads and writes sysfs attribute files directly.

    Every call opens the file, performs a single transfer and closes it again,
    so nothing is held open between calls.

    To write the brightness your user will need write permissions for
    `/sys/class/backlight/*/brightness` or you will need to run the program
    as root.
    '''
    _logger = _logger.getChild('SysFiles')

    def read_integer(self, path: str) -> int:
        try:
            with open(path, 'r') as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise BacklightParseError(
                f'{path!r} does not contain text - {format_exc(e)}', path=path
            ) from e
        except OSError as e:
            raise BacklightIOError.from_os_error(e) from e

        value = parse_integer(content, source=path)
        self._logger.debug(f'read {value} from {path!r}')
        return value

    def write_integer(self, path: str, value: int):
        try:
            with open(path, 'w') as f:
                f.write(str(value))
        except OSError as e:
            raise BacklightIOError.from_os_error(e) from e
        self._logger.debug(f'wrote {value} to {path!r}')


def parse_integer(text: str, source: Optional[str] = None) -> int:
    '''
    Parse the contents of a sysfs attribute file.

    Surrounding whitespace (including the trailing newline the kernel appends)
    is ignored. Anything other than ASCII digits is rejected, so signs,
    underscores and decimal points all count as malformed.

    Args:
        text: the raw file contents
        source: where `text` came from, used in the error message

    Raises:
        BacklightParseError: if `text` is not a non-negative decimal integer

    Example:
        ```python
        from backlight_control.helpers import parse_integer

        parse_integer('255\\n')  # 255
        parse_integer('abc')  # raises BacklightParseError
        ```
    '''
    stripped = text.strip()
    if not stripped or not (stripped.isascii() and stripped.isdigit()):
        where = '' if source is None else f' in {source!r}'
        raise BacklightParseError(
            f'expected a non-negative integer{where}, got {text!r}',
            path=source, content=text
        )
    return int(stripped)


def scale(numerator: int, denominator: int) -> int:
    '''
    Integer division that rounds halves up (towards positive infinity).

    Uses exact integer arithmetic so there is no float error at either end of
    large ranges. `denominator` must be positive.
    '''
    return (2 * numerator + denominator) // (2 * denominator)


def to_percent(value: RawBrightness, maximum: RawBrightness) -> IntPercentage:
    '''
    Convert a raw brightness into a percentage of `maximum`.

    Raises:
        BacklightDivisionError: if `maximum` is 0
    '''
    if maximum == 0:
        raise BacklightDivisionError('max_brightness is 0, cannot calculate a percentage')
    return scale(100 * value, maximum)


def from_percent(percent: IntPercentage, maximum: RawBrightness) -> RawBrightness:
    '''Convert a percentage of `maximum` into a raw brightness'''
    return scale(percent * maximum, 100)


def percentage(
    value: Percentage,
    current: Optional[Union[int, Callable[[], int]]] = None
) -> IntPercentage:
    '''
    Convenience function to convert a brightness value into a percentage. Can handle
    integers, floats and strings. Also can handle relative strings (eg: `'+10'` or `'-10'`)

    No clamping is applied. It is up to the caller to decide what range is
    acceptable.

    Args:
        value: the brightness value to convert
        current: the current brightness percentage or a function that returns it.
            Only used (and only called) when `value` is a relative string

    Returns:
        `.types.IntPercentage`
    '''
    number = float(str(value))
    if not math.isfinite(number):
        raise ValueError(f'{value!r} is not a finite number')

    if isinstance(value, str) and value.strip()[:1] in ('+', '-'):
        if current is None:
            raise ValueError(f'relative value {value!r} given without a current brightness')
        if callable(current):
            current = current()
        return int(number) + int(current)
    return int(number)
