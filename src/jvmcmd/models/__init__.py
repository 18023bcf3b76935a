"""Model package for jvmcmd."""

from jvmcmd.models.java_parameters import JavaParameters, has_parameter, has_property
from jvmcmd.models.launch_spec import LaunchSpec
from jvmcmd.models.sdk import Sdk

__all__ = [
    "JavaParameters",
    "LaunchSpec",
    "Sdk",
    "has_parameter",
    "has_property",
]
