"""
Error Model

Exception kinds raised inside the bridge and the thread-scoped last-error
slot each family exposes at its boundary.

Boundary functions never let a BridgeError (or an engine exception) escape.
They record the message in their family's ErrorState and return a sentinel.
"""

import logging
import threading
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Failure kinds reported through ErrorState"""
    INVALID_ARGUMENT = "invalid_argument"
    CONFIG_MISSING = "config_missing"
    LOAD_ERROR = "load_error"
    RESOLUTION_ERROR = "resolution_error"
    COMPILE_ERROR = "compile_error"
    DECODE_ERROR = "decode_error"
    BUFFER_TOO_SMALL = "buffer_too_small"


class BridgeError(Exception):
    """Base class for all bridge failures; subclasses name their kind"""
    kind: Optional[ErrorKind] = None


class InvalidArgumentError(BridgeError):
    kind = ErrorKind.INVALID_ARGUMENT


class ConfigMissingError(BridgeError):
    kind = ErrorKind.CONFIG_MISSING


class LoadError(BridgeError):
    kind = ErrorKind.LOAD_ERROR


class ResolutionError(BridgeError):
    kind = ErrorKind.RESOLUTION_ERROR


class CompileError(BridgeError):
    kind = ErrorKind.COMPILE_ERROR


class DecodeError(BridgeError):
    kind = ErrorKind.DECODE_ERROR


class BufferTooSmallError(BridgeError):
    kind = ErrorKind.BUFFER_TOO_SMALL


_ERROR_CLASSES = {cls.kind: cls for cls in (
    InvalidArgumentError,
    ConfigMissingError,
    LoadError,
    ResolutionError,
    CompileError,
    DecodeError,
    BufferTooSmallError,
)}


def error_class_for(kind: Optional[ErrorKind]) -> type:
    """Map an ErrorKind back to its exception class (BridgeError if unknown)"""
    return _ERROR_CLASSES.get(kind, BridgeError)


class ErrorState:
    """
    Last-error slot private to each calling thread.
    
    Reads are non-consuming: get() returns the same message until the
    next clear() or record() on the same thread.
    
    Attributes:
        family: Name used in log records ("color" or "image")
    """
    
    def __init__(self, family: str, default_message: str):
        self.family = family
        self._default_message = default_message
        self._local = threading.local()
    
    def clear(self) -> None:
        self._local.message = None
        self._local.kind = None
    
    def record(self, error: BaseException, kind: Optional[ErrorKind] = None) -> None:
        """
        Store an exception's message as this thread's last error.
        
        Args:
            error: The caught exception
            kind: Kind to record; defaults to the BridgeError's own kind.
                  Errors without a kind are recorded unclassified (None).
        """
        if kind is None and isinstance(error, BridgeError):
            kind = error.kind
        message = str(error) or self._default_message
        self._local.message = message
        self._local.kind = kind
        logger.warning(
            "%s bridge error (%s): %s",
            self.family, kind.value if kind else "unclassified", message
        )
    
    def get(self) -> Optional[str]:
        return getattr(self._local, "message", None)
    
    def get_kind(self) -> Optional[ErrorKind]:
        return getattr(self._local, "kind", None)


color_errors = ErrorState("color", "unknown OCIO error")
image_errors = ErrorState("image", "unknown image decode error")
