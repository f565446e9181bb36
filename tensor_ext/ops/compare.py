from __future__ import annotations
import torch

from tensor_ext.errors import ConfigError


def _promote(a: torch.Tensor, b: torch.Tensor):
    dtype = torch.promote_types(a.dtype, b.dtype)
    return a.to(dtype), b.to(dtype)


def equal(a: torch.Tensor, b: torch.Tensor) -> bool:
    """True if both tensors have the same shape and elements."""
    if a.shape != b.shape:
        return False
    return torch.equal(*_promote(a, b))


def allclose(a: torch.Tensor, b: torch.Tensor, rtol: float = 1e-5, atol: float = 1e-8) -> bool:
    if rtol < 0 or atol < 0:
        raise ConfigError(f"rtol and atol must be non-negative, got rtol={rtol}, atol={atol}")
    if a.shape != b.shape:
        return False
    return torch.allclose(*_promote(a, b), rtol=rtol, atol=atol)
