"""Launch specification handed to whatever spawns the process."""

import os
import shlex
from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class LaunchSpec:
    """A ready-to-execute VM command line.

    ``cleanup_paths`` lists side files created for this launch. The caller that
    runs the process owns them and should delete them once the process exits.
    """

    exe_path: str
    arguments: tuple[str, ...]
    working_directory: str | None = None
    env: dict[str, str] | None = None
    pass_parent_envs: bool = True
    charset: str | None = None
    cleanup_paths: tuple[str, ...] = field(default_factory=tuple)

    def command_line(self) -> list[str]:
        return [self.exe_path, *self.arguments]

    def command_line_string(self) -> str:
        return shlex.join(self.command_line())

    def effective_env(self, base: dict[str, str] | None = None) -> dict[str, str] | None:
        """Return the child environment, or None to inherit the parent's as is."""
        if self.env is None:
            return None
        merged: dict[str, str] = {}
        if self.pass_parent_envs:
            merged.update(os.environ if base is None else base)
        merged.update(self.env)
        return merged

    def to_dict(self) -> dict:
        data = asdict(self)
        data["arguments"] = list(self.arguments)
        data["cleanup_paths"] = list(self.cleanup_paths)
        return data
