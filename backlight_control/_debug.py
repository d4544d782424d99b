'''
A small helper module to assist with debugging the backlight_control library
'''
import logging
import os
import platform
import traceback
from typing import Optional

from . import config


@config.default_params
def info(device: Optional[str] = None, root: Optional[str] = None) -> dict:
    '''
    Gather and return information that may (or may not) be useful for debugging
    issues with a backlight device.

    Only reads are attempted. The brightness is never written.

    Args:
        device: the device name. Defaults to `.config.DEVICE`
        root: the sysfs backlight directory. Defaults to `.config.SYSFS_ROOT`
    '''
    import backlight_control as blc

    logger = logging.getLogger(__name__).getChild('info')

    br = blc.Brightness(device, root=root)
    debug_info = {
        'version': blc.__version__,
        'platform': platform.system(),
        'file': blc.__file__,
        'device': device,
        'path': br.path,
        'exists': os.path.isdir(br.path),
    }

    logger.debug(f'checking attribute files under {br.path!r}')

    files = {}
    for attribute in ('brightness', 'max_brightness'):
        path = os.path.join(br.path, attribute)
        files[attribute] = {
            'exists': os.path.isfile(path),
            'readable': os.access(path, os.R_OK),
            'writable': os.access(path, os.W_OK)
        }
    debug_info['files'] = files

    for op in ('get_max_brightness', 'get_brightness', 'get_percent'):
        logger.debug(f'calling {op} for device {device!r}')
        try:
            result = getattr(br, op)()
        except Exception:
            result = traceback.format_exc()
        finally:
            debug_info[op] = result

    return debug_info
