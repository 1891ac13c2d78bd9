"""Core module - configuration, errors and the TSFrame container."""

from tsframe.core.config import FrameConfig
from tsframe.core.errors import (
    ERROR_REGISTRY,
    EArgument,
    EContract,
    EDomain,
    EReservedName,
    ETypeMismatch,
    EUnsortedIndex,
    TSFrameError,
    get_error_class,
)
from tsframe.core.frame import STATISTICS, TSFrame, build_frame

__all__ = [
    # Config
    "FrameConfig",
    # Data
    "TSFrame",
    "STATISTICS",
    "build_frame",
    # Errors
    "TSFrameError",
    "EDomain",
    "EArgument",
    "ETypeMismatch",
    "EReservedName",
    "EContract",
    "EUnsortedIndex",
    "ERROR_REGISTRY",
    "get_error_class",
]
