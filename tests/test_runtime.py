"""Unit tests for jvmcmd.runtime."""

import pytest

from jvmcmd.errors import CantRunError, UnresolvableRuntimeError
from jvmcmd.models import Sdk
from jvmcmd.runtime import JavaSdkType, SdkType, get_sdk_type, register_sdk_type, resolve_vm_executable


class _PythonSdkType(SdkType):
    kind = "python"


class _ContainerSdkType(SdkType):
    kind = "container-java"
    launches_vm = True

    def vm_executable_path(self, sdk):
        return f"{sdk.home}/entrypoint"


class TestResolveVmExecutable:
    def test_finds_java_under_home(self, jdk, java_exe):
        assert resolve_vm_executable(jdk) == str(java_exe)

    def test_explicit_executable_wins(self, tmp_path, java_exe):
        sdk = Sdk(home=str(tmp_path / "elsewhere"), vm_executable=str(java_exe))
        assert resolve_vm_executable(sdk) == str(java_exe)

    def test_explicit_executable_must_exist(self, tmp_path):
        sdk = Sdk(home=str(tmp_path), vm_executable=str(tmp_path / "nope"))
        with pytest.raises(UnresolvableRuntimeError, match="Cannot find VM executable"):
            resolve_vm_executable(sdk)

    def test_non_executable_file_is_rejected(self, jdk, java_exe):
        java_exe.chmod(0o644)
        with pytest.raises(UnresolvableRuntimeError):
            resolve_vm_executable(jdk)

    def test_no_sdk(self):
        with pytest.raises(UnresolvableRuntimeError, match="No JDK specified"):
            resolve_vm_executable(None)

    def test_unknown_kind(self, tmp_path):
        with pytest.raises(UnresolvableRuntimeError, match="No JDK specified"):
            resolve_vm_executable(Sdk(home=str(tmp_path), kind="ruby"))

    def test_registered_kind_that_cannot_launch(self, tmp_path):
        register_sdk_type(_PythonSdkType())
        with pytest.raises(UnresolvableRuntimeError, match="No JDK specified"):
            resolve_vm_executable(Sdk(home=str(tmp_path), kind="python"))

    def test_pluggable_sdk_type(self):
        register_sdk_type(_ContainerSdkType())
        sdk = Sdk(home="/sandbox", kind="container-java")
        assert resolve_vm_executable(sdk) == "/sandbox/entrypoint"

    def test_error_is_a_cant_run_error(self):
        with pytest.raises(CantRunError):
            resolve_vm_executable(None)


def test_java_is_registered_by_default():
    assert isinstance(get_sdk_type("java"), JavaSdkType)
