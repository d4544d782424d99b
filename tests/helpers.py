import os
from pathlib import Path
from typing import Optional, Union

MEMORY_ROOT = '/fake/sys/class/backlight'
'''Root used for devices backed by `MemoryFiles`, never created on disk'''


def make_device(
    root: Union[str, Path],
    name: str,
    brightness: Optional[str] = '0\n',
    max_brightness: Optional[str] = '255\n'
) -> Path:
    '''
    Create a fake backlight device directory under `root`.
    Passing `None` for either file leaves that file out.
    '''
    path = Path(root) / name
    path.mkdir(parents=True, exist_ok=True)
    if brightness is not None:
        (path / 'brightness').write_text(brightness)
    if max_brightness is not None:
        (path / 'max_brightness').write_text(max_brightness)
    return path


def device_files(root: Union[str, Path], name: str, brightness='0', max_brightness='255') -> dict:
    '''Contents for a `MemoryFiles` double, keyed the way `Brightness` builds its paths'''
    path = os.path.join(str(root), name)
    return {
        os.path.join(path, 'brightness'): brightness,
        os.path.join(path, 'max_brightness'): max_brightness
    }
