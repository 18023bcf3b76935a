"""Resolve a runtime handle to the VM executable it launches."""

import logging
import os

from jvmcmd.errors import UnresolvableRuntimeError
from jvmcmd.models.sdk import JAVA_SDK_KIND, Sdk

log = logging.getLogger(__name__)


class SdkType:
    """A kind of runtime. Only process-capable kinds can launch a VM."""

    kind = ""
    launches_vm = False

    def vm_executable_path(self, sdk: Sdk) -> str | None:
        return None


class JavaSdkType(SdkType):
    kind = JAVA_SDK_KIND
    launches_vm = True

    def vm_executable_path(self, sdk: Sdk) -> str | None:
        if sdk.vm_executable:
            return sdk.vm_executable if _is_executable(sdk.vm_executable) else None
        name = "java.exe" if os.name == "nt" else "java"
        candidate = os.path.join(sdk.home, "bin", name)
        if _is_executable(candidate):
            return candidate
        log.debug("no VM executable at %s", candidate)
        return None


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


_SDK_TYPES: dict[str, SdkType] = {JAVA_SDK_KIND: JavaSdkType()}


def register_sdk_type(sdk_type: SdkType) -> None:
    """Make ``sdk_type`` available to runtimes whose ``kind`` matches it."""
    _SDK_TYPES[sdk_type.kind] = sdk_type


def get_sdk_type(kind: str) -> SdkType | None:
    return _SDK_TYPES.get(kind)


def resolve_vm_executable(sdk: Sdk | None) -> str:
    """Return the VM executable for ``sdk`` or raise UnresolvableRuntimeError."""
    if sdk is None:
        raise UnresolvableRuntimeError("No JDK specified")
    sdk_type = get_sdk_type(sdk.kind)
    if sdk_type is None or not sdk_type.launches_vm:
        raise UnresolvableRuntimeError("No JDK specified")
    exe_path = sdk_type.vm_executable_path(sdk)
    if not exe_path:
        raise UnresolvableRuntimeError(f"Cannot find VM executable for {sdk.name or sdk.home}")
    return exe_path
