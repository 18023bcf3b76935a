"""Runtime handle model for jvmcmd."""

from pydantic import BaseModel

JAVA_SDK_KIND = "java"


class Sdk(BaseModel):
    """A configured runtime that may be able to launch a VM process."""

    name: str = ""
    home: str
    kind: str = JAVA_SDK_KIND
    vm_executable: str | None = None
