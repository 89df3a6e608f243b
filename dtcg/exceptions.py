"""Exception classes."""

from pathlib import Path
from typing import Sequence


class InputNotFoundError(FileNotFoundError):
    """Input path does not exist."""

    def __init__(self, input_path: Path, *args: object):
        """Build message."""
        message = f"Input not found: {input_path}"
        super().__init__(message, *args)


class NoSupportedInputError(FileNotFoundError):
    """Input path holds no file with a supported extension."""

    def __init__(self, input_path: Path, extensions: Sequence[str], *args: object):
        """Build message."""
        exts = "/".join(sorted(extensions))
        message = f"No supported input files found ({exts}): {input_path}"
        super().__init__(message, *args)


class TokenPathCollisionError(ValueError):
    """Two variables resolve to paths where one is an ancestor of the other."""

    def __init__(self, name: str, path: Sequence[str], *args: object):
        """Build message."""
        self.name = name
        self.path = tuple(path)
        message = (
            f"Token path collision for {name}: "
            f"{'/'.join(self.path)} overlaps an existing token or group"
        )
        super().__init__(message, *args)


class ConfigError(ValueError):
    """Invalid configuration file."""

    def __init__(self, config_path: Path, reason: str, *args: object):
        """Build message."""
        message = f"Invalid config {config_path}: {reason}"
        super().__init__(message, *args)


class DuplicateSourceNameError(ValueError):
    """Two inputs share a source name and would overwrite each other's outputs."""

    def __init__(self, name: str, paths: Sequence[Path] = (), *args: object):
        """Build message."""
        self.name = name
        message = f"Duplicate source name: {name}"
        if paths:
            message += f" ({', '.join(str(p) for p in paths)})"
        super().__init__(message, *args)
