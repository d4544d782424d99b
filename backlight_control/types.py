'''
Submodule containing types and type aliases used throughout the library.

Splitting these definitions into a seperate submodule allows for detailed
explanations without cluttering up the rest of the library.
'''
from typing import Union

RawBrightness = int
'''
A brightness level in driver defined steps, as found in the `brightness` file.
Sensible values lie between 0 and the device's `max_brightness` (inclusive) but
the library never enforces that.
'''

IntPercentage = int
'''
An integer that represents a brightness level relative to `max_brightness`.
Usually between 0 and 100 (inclusive). Other than the implied bounds, this is
just a normal integer.
'''

Percentage = Union[IntPercentage, str]
'''
An `IntPercentage` or a string representing an `IntPercentage`.

String values may come in two forms:
- Absolute values: for example `'40'` converts directly to `int('40')`
- Relative values: strings prefixed with `+`/`-` will be interpreted relative to the
    current brightness percentage.
    For example, if the current brightness is 50%, a value of `'+40'` would imply 90% brightness
    and a value of `'-40'` would imply 10% brightness.

Relative brightness values are resolved by the `.helpers.percentage` function.
'''

DeviceName = str
'''
The name of a backlight device directory under the sysfs backlight class,
for example `'intel_backlight'` or `'backlight-lcd'`.
'''
