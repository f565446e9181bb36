from __future__ import annotations


class TensorExtError(Exception):
    """Base class for errors raised by tensor_ext."""


class ShapeError(TensorExtError, ValueError):
    """Incompatible or insufficient tensor dimensions."""


class ConfigError(TensorExtError, ValueError):
    """Mutually exclusive or out-of-range options."""


class DTypeError(TensorExtError, TypeError):
    """Element type unsuited to the requested interpretation."""


class CastError(TensorExtError, ValueError):
    """Scalar not representable in the target element type."""
