from __future__ import annotations
import math
import numbers
from typing import Optional, Union
import torch

from tensor_ext.errors import CastError, ShapeError
from tensor_ext.ops.triangular import tril, triu
from tensor_ext.types import CastPolicy


def _to_float(value, dtype: torch.dtype) -> float:
    try:
        return float(value)
    except OverflowError:
        raise CastError(f"{value!r} overflows {dtype}") from None


def _coerce(value, dtype: torch.dtype, policy: CastPolicy):
    if isinstance(value, torch.Tensor):
        if value.numel() != 1:
            raise CastError(f"expected a scalar, got a tensor of shape {tuple(value.shape)}")
        value = value.item()
    if not isinstance(value, numbers.Number):
        raise CastError(f"{value!r} is not a number")

    if dtype.is_complex:
        try:
            return complex(value)
        except OverflowError:
            raise CastError(f"{value!r} overflows {dtype}") from None
    if not isinstance(value, numbers.Real):
        raise CastError(f"complex value {value!r} cannot be stored as {dtype}")

    if dtype.is_floating_point:
        v = _to_float(value, dtype)
        if math.isfinite(v) and abs(v) > torch.finfo(dtype).max:
            raise CastError(f"{value!r} overflows {dtype}")
        return v

    # integer and bool targets
    if not isinstance(value, numbers.Integral) and not math.isfinite(_to_float(value, dtype)):
        raise CastError(f"{value!r} cannot be stored as {dtype}")

    if dtype == torch.bool:
        if policy is CastPolicy.TRUNCATE:
            return bool(value)
        if value not in (0, 1):
            raise CastError(f"{value!r} is not a boolean value")
        return bool(value)

    if isinstance(value, numbers.Integral):
        iv = int(value)
    else:
        f = _to_float(value, dtype)
        if policy is CastPolicy.STRICT and not f.is_integer():
            raise CastError(f"{value!r} has a fractional part and {dtype} is integral")
        iv = int(f)
    info = torch.iinfo(dtype)
    if not info.min <= iv <= info.max:
        raise CastError(f"{value!r} is outside the range of {dtype} [{info.min}, {info.max}]")
    return iv


def values_like(ref: torch.Tensor, value, *, policy: CastPolicy = CastPolicy.STRICT) -> torch.Tensor:
    """Tensor with ref's shape, dtype and device, filled with `value`.

    `value` is coerced to ref.dtype according to `policy`; CastError is raised
    when it cannot be represented.
    """
    return torch.full_like(ref, _coerce(value, ref.dtype, policy))


def eye(n: int, m: Optional[int] = None, *, dtype: torch.dtype = torch.float32,
        device: Optional[Union[str, torch.device]] = None) -> torch.Tensor:
    m = n if m is None else m
    if n < 0 or m < 0:
        raise ShapeError(f"eye sizes must be non-negative, got ({n}, {m})")
    ones = torch.ones((n, m), dtype=dtype, device=device)
    return triu(tril(ones, 0), 0)
