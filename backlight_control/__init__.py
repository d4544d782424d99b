import logging
import os
from typing import Optional

from ._version import __author__, __version__  # noqa: F401
from .exceptions import (BacklightDivisionError, BacklightError,  # noqa: F401
                         BacklightIOError, BacklightParseError)
from .helpers import FileAccess, SysFiles, from_percent, to_percent
from .types import DeviceName, IntPercentage, RawBrightness
from . import config


_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())


class Brightness():
    '''
    Represents a single backlight device under the sysfs backlight class.

    Nothing is cached: every call goes back to the files in the device
    directory, so the values returned are always whatever the kernel currently
    reports. Constructing an instance never touches the filesystem, errors only
    surface once an operation is attempted.

    Example:
        ```python
        from backlight_control import Brightness

        br = Brightness('backlight-lcd')
        print('Maximum brightness:', br.get_max_brightness())
        print('Current brightness:', br.get_brightness())
        print(f'Current brightness: {br.get_percent()}%')

        br.set_percent(50)
        ```
    '''

    def __init__(
        self,
        name: DeviceName,
        root: Optional[str] = None,
        files: Optional[FileAccess] = None
    ):
        '''
        Args:
            name: the name of the device directory, eg: `'intel_backlight'`
            root: the directory containing the backlight devices.
                Defaults to `.config.SYSFS_ROOT`
            files: how the sysfs files are read and written.
                Defaults to `.helpers.SysFiles`
        '''
        self._name = name
        root = config.SYSFS_ROOT if root is None else root
        # plain concatenation so an absolute name stays under root
        self._path = f'{root}/{name}'
        self._files = SysFiles() if files is None else files
        self._logger = _logger.getChild(self.__class__.__name__).getChild(name)

    def __repr__(self):
        return f'{self.__class__.__name__}(name={self._name!r}, path={self._path!r})'

    @property
    def name(self) -> DeviceName:
        '''The name of the device directory'''
        return self._name

    @property
    def path(self) -> str:
        '''The device directory. Fixed at construction time'''
        return self._path

    def _file(self, attribute: str) -> str:
        return os.path.join(self._path, attribute)

    def get_max_brightness(self) -> RawBrightness:
        '''
        Returns the maximum brightness supported by the backlight.

        Raises:
            BacklightIOError: if `max_brightness` cannot be read
            BacklightParseError: if `max_brightness` does not contain an integer
        '''
        return self._files.read_integer(self._file('max_brightness'))

    def get_brightness(self) -> RawBrightness:
        '''
        Returns the current raw brightness, in driver defined steps.

        Raises:
            BacklightIOError: if `brightness` cannot be read
            BacklightParseError: if `brightness` does not contain an integer
        '''
        return self._files.read_integer(self._file('brightness'))

    def set_brightness(self, value: RawBrightness):
        '''
        Writes a new raw brightness level.

        The value is written as-is. Values outside of `0..max_brightness` are
        not clamped; the driver decides whether to clamp, reject or ignore them.

        Args:
            value: the new brightness level

        Raises:
            BacklightIOError: if `brightness` cannot be opened or written
        '''
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f'value must be of type int, not {type(value).__name__!r}')
        self._logger.debug(f'set brightness {value}')
        self._files.write_integer(self._file('brightness'), value)

    def get_percent(self) -> IntPercentage:
        '''
        Returns the current brightness as a percentage of the maximum,
        rounded half up.

        Raises:
            BacklightIOError: if either file cannot be read
            BacklightParseError: if either file does not contain an integer
            BacklightDivisionError: if `max_brightness` is 0
        '''
        value = self.get_brightness()
        maximum = self.get_max_brightness()
        return to_percent(value, maximum)

    def set_percent(self, percent: IntPercentage):
        '''
        Sets the brightness as a percentage of the maximum, rounded half up.

        `percent` is not range checked. A value above 100 yields a raw value
        above `max_brightness`, which is passed to `set_brightness` unchanged.

        Args:
            percent: the new brightness percentage

        Raises:
            BacklightIOError: if `max_brightness` cannot be read or `brightness` written
            BacklightParseError: if `max_brightness` does not contain an integer
        '''
        maximum = self.get_max_brightness()
        target = from_percent(percent, maximum)
        self._logger.debug(f'set percent {percent} -> {target}/{maximum}')
        self.set_brightness(target)


@config.default_params
def get_max_brightness(device: Optional[DeviceName] = None, root: Optional[str] = None) -> RawBrightness:
    '''
    Returns the maximum brightness of a device. See `Brightness.get_max_brightness`

    Args:
        device: the device name. Defaults to `.config.DEVICE`
        root: the sysfs backlight directory. Defaults to `.config.SYSFS_ROOT`
    '''
    return Brightness(device, root=root).get_max_brightness()


@config.default_params
def get_brightness(device: Optional[DeviceName] = None, root: Optional[str] = None) -> RawBrightness:
    '''
    Returns the current raw brightness of a device. See `Brightness.get_brightness`

    Args:
        device: the device name. Defaults to `.config.DEVICE`
        root: the sysfs backlight directory. Defaults to `.config.SYSFS_ROOT`

    Example:
        ```python
        import backlight_control as blc

        # brightness of the default device
        current = blc.get_brightness()

        # brightness of a named device
        intel = blc.get_brightness(device='intel_backlight')
        ```
    '''
    return Brightness(device, root=root).get_brightness()


@config.default_params
def set_brightness(
    value: RawBrightness, device: Optional[DeviceName] = None, root: Optional[str] = None
):
    '''
    Sets the raw brightness of a device. See `Brightness.set_brightness`

    Args:
        value: the new brightness level
        device: the device name. Defaults to `.config.DEVICE`
        root: the sysfs backlight directory. Defaults to `.config.SYSFS_ROOT`
    '''
    Brightness(device, root=root).set_brightness(value)


@config.default_params
def get_percent(device: Optional[DeviceName] = None, root: Optional[str] = None) -> IntPercentage:
    '''
    Returns the brightness of a device as a percentage. See `Brightness.get_percent`
    '''
    return Brightness(device, root=root).get_percent()


@config.default_params
def set_percent(
    percent: IntPercentage, device: Optional[DeviceName] = None, root: Optional[str] = None
):
    '''
    Sets the brightness of a device as a percentage. See `Brightness.set_percent`

    Example:
        ```python
        import backlight_control as blc

        # set the default device to 50%
        blc.set_percent(50)
        ```
    '''
    Brightness(device, root=root).set_percent(percent)
