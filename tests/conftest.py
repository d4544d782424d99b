import pytest

import backlight_control as blc
from backlight_control import config

from .helpers import MEMORY_ROOT, device_files, make_device
from .mocks.files_mock import MemoryFiles


@pytest.fixture(autouse=True)
def sysfs_root(tmp_path, monkeypatch: pytest.MonkeyPatch):
    '''Point the library at an empty synthetic sysfs tree so the real one is never touched'''
    root = tmp_path / 'backlight'
    root.mkdir()
    monkeypatch.setattr(config, 'SYSFS_ROOT', str(root))
    return root


@pytest.fixture
def device_dir(sysfs_root):
    '''A synthetic `backlight-lcd` device at half brightness'''
    return make_device(sysfs_root, 'backlight-lcd', brightness='128\n', max_brightness='255\n')


@pytest.fixture
def files():
    return MemoryFiles(device_files(MEMORY_ROOT, 'backlight-lcd'))


@pytest.fixture
def memory_device(files) -> blc.Brightness:
    return blc.Brightness('backlight-lcd', root=MEMORY_ROOT, files=files)
