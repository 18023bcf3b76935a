"""Launch parameters for a JVM process."""

import codecs

from pydantic import BaseModel, Field, field_validator

from jvmcmd.models.sdk import Sdk


def has_parameter(parameters: list[str], name: str) -> bool:
    """Return whether ``name`` appears as a whole token."""
    return name in parameters


def has_property(parameters: list[str], name: str) -> bool:
    """Return whether a ``-D<name>`` system property is defined."""
    prefix = f"-D{name}"
    return any(p == prefix or p.startswith(prefix + "=") for p in parameters)


class JavaParameters(BaseModel):
    """Everything needed to describe one JVM launch."""

    jdk: Sdk | None = None
    vm_parameters: list[str] = Field(default_factory=list)
    class_path: list[str] = Field(default_factory=list)
    main_class: str | None = None
    program_parameters: list[str] = Field(default_factory=list)
    working_directory: str | None = None
    env: dict[str, str] | None = None
    pass_parent_envs: bool = True
    charset: str | None = None

    @field_validator("charset")
    @classmethod
    def _known_charset(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            return codecs.lookup(value).name
        except LookupError as e:
            raise ValueError(f"unknown charset: {value}") from e
