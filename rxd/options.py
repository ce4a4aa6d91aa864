from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .utils import (
    DEFAULT_BINARY_COLUMNS,
    DEFAULT_COLUMNS,
    DEFAULT_FLAT_COLUMNS,
    DEFAULT_GROUP_SIZE,
    DEFAULT_INCLUDE_COLUMNS,
    DEFAULT_INCLUDE_NAME,
    MAX_GROUP_SIZE,
)


class OutputMode(Enum):
    REGULAR = "regular"
    BINARY = "binary"
    FLAT = "flat"
    INCLUDE = "include"


class ColorMode(Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def resolve(self, is_terminal: bool) -> bool:
        if self is ColorMode.AUTO:
            return is_terminal
        return self is ColorMode.ALWAYS


DEFAULT_MODE_COLUMNS = {
    OutputMode.REGULAR: DEFAULT_COLUMNS,
    OutputMode.BINARY: DEFAULT_BINARY_COLUMNS,
    OutputMode.FLAT: DEFAULT_FLAT_COLUMNS,
    OutputMode.INCLUDE: DEFAULT_INCLUDE_COLUMNS,
}


@dataclass(frozen=True)
class Options:
    """Resolved dump settings. Built once and never changed during a run."""

    columns: Optional[int] = None
    group_size: int = DEFAULT_GROUP_SIZE
    little_endian: bool = False
    uppercase: bool = False
    bits: bool = False
    postscript: bool = False
    include: bool = False
    include_name: Optional[str] = None
    capitalize: bool = False
    length: Optional[int] = None
    offset: int = 0
    seek: int = 0
    seek_relative: bool = False
    autoskip: bool = False
    decimal: bool = False
    color: bool = False

    def __post_init__(self):
        if self.columns is not None and self.columns < 1:
            object.__setattr__(self, "columns", 1)
        object.__setattr__(self, "group_size", min(max(self.group_size, 1), MAX_GROUP_SIZE))
        if self.length is not None and self.length < 0:
            object.__setattr__(self, "length", 0)
        if self.offset < 0:
            raise ValueError("display offset must not be negative, got %d" % self.offset)

    @property
    def mode(self) -> OutputMode:
        if self.include:
            return OutputMode.INCLUDE
        if self.postscript:
            return OutputMode.FLAT
        if self.bits:
            return OutputMode.BINARY
        return OutputMode.REGULAR

    @property
    def resolved_columns(self) -> int:
        if self.columns is not None:
            return self.columns
        return DEFAULT_MODE_COLUMNS[self.mode]

    @property
    def array_name(self) -> str:
        name = self.include_name or DEFAULT_INCLUDE_NAME
        return name.upper() if self.capitalize else name

    @property
    def length_name(self) -> str:
        name = (self.include_name or DEFAULT_INCLUDE_NAME) + "_len"
        return name.upper() if self.capitalize else name
