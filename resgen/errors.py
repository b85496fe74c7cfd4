from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple


class ResGenError(Exception):
    """Base class for every fatal error of a run. str() is shown to the user."""


class UnknownPlatform(ResGenError, KeyError):
    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"Unknown platform: {platform}")

    # KeyError.__str__ would quote the message
    def __str__(self) -> str:
        return self.args[0]


class InvalidPlatformList(ResGenError):
    def __init__(self, unknown: Sequence[str]):
        self.unknown = list(unknown)
        super().__init__("Bad platforms: " + ",".join(self.unknown))


class SourceImageUnreadable(ResGenError):
    def __init__(self, kind: str, path: Path, cause: Optional[BaseException] = None):
        self.kind = kind
        self.path = Path(path)
        self.cause = cause
        msg = f"Could not load {kind} file ({self.path})"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)


class SourceImageWrongDimensions(ResGenError):
    def __init__(self, kind: str, path: Path, actual: Tuple[int, int], expected: Tuple[int, int]):
        self.kind = kind
        self.path = Path(path)
        self.actual = tuple(actual)
        self.expected = tuple(expected)
        super().__init__(
            f"Bad {kind} file ({actual[0]}x{actual[1]}), expected {expected[0]}x{expected[1]}: {self.path}"
        )


class OutputDirMissing(ResGenError):
    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Output directory not found: {self.path}")


class OutputDirCreateFailed(ResGenError):
    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        msg = f"Output directory could not be created: {self.path}"
        if cause is not None:
            msg += f" ({cause})"
        super().__init__(msg)


class GenerationFailed(ResGenError):
    def __init__(self, platform: str, definition: Optional[str], cause: BaseException):
        self.platform = platform
        self.definition = definition
        self.cause = cause
        where = f"{platform}/{definition}" if definition else platform
        super().__init__(f"Generation failed for {where}: {cause}")
