'''
Contains globally applicable configuration variables.
'''
import inspect
from functools import wraps
from typing import Callable


def default_params(func: Callable):
    '''
    This decorator sets default kwarg values using global configuration variables.

    Positional arguments are bound to their parameter names first, so
    `get_brightness('intel_backlight')` works the same as
    `get_brightness(device='intel_backlight')`.
    '''
    positional = [
        p.name for p in inspect.signature(func).parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]

    @wraps(func)
    def wrapper(*args, **kwargs):
        if len(args) > len(positional):
            raise TypeError(
                f'{func.__name__}() takes {len(positional)} positional arguments but {len(args)} were given'
            )
        for name, value in zip(positional, args):
            if name in kwargs:
                raise TypeError(f'{func.__name__}() got multiple values for argument {name!r}')
            kwargs[name] = value
        if kwargs.get('device') is None:
            kwargs['device'] = DEVICE
        if kwargs.get('root') is None:
            kwargs['root'] = SYSFS_ROOT
        return func(**kwargs)
    return wrapper


SYSFS_ROOT: str = '/sys/class/backlight'
'''
Directory holding one sub-directory per backlight device.

Override this to point the library at a synthetic tree (eg: in tests).
'''

DEVICE: str = 'backlight-lcd'
'''
Default value for the `device` parameter in top-level functions and the CLI.
'''
