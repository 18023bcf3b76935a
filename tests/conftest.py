import os

import pytest

from jvmcmd.config import LauncherSettings
from jvmcmd.models import Sdk


@pytest.fixture
def java_exe(tmp_path):
    """An executable stand-in for <jdk>/bin/java."""
    bin_dir = tmp_path / "jdk" / "bin"
    bin_dir.mkdir(parents=True)
    exe = bin_dir / ("java.exe" if os.name == "nt" else "java")
    exe.write_text("#!/bin/sh\n")
    exe.chmod(0o755)
    return exe


@pytest.fixture
def jdk(java_exe):
    return Sdk(name="test-jdk", home=str(java_exe.parent.parent))


@pytest.fixture
def settings():
    return LauncherSettings(runtime_lib_dir="/opt/jvmcmd/lib", default_charset=None)
