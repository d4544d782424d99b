import sys

from setuptools import setup

sys.path.insert(0, 'backlight_control')
from _version import __author__, __version__  # noqa: E402

setup(
    name='backlight_control',
    version=__version__,
    license='MIT',
    author=__author__,
    author_email='andy.pont@sdcsystems.com',
    packages=['backlight_control'],
    install_requires=[],
    extras_require={'test': ['pytest', 'pytest-mock']},
    entry_points={'console_scripts': ['backlight-control=backlight_control.__main__:main']},
    description='A Python tool to read and set Linux backlight brightness through sysfs',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3 :: Only'
    ],
    python_requires='>=3.8'
)
