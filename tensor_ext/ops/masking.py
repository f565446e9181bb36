from __future__ import annotations
import torch

from tensor_ext.errors import DTypeError
from tensor_ext.shapes import require_broadcastable_to


def masked_fill(x: torch.Tensor, mask: torch.Tensor, value) -> torch.Tensor:
    """Return a copy of x with `value` written wherever mask is True."""
    if mask.dtype != torch.bool:
        raise DTypeError(f"mask must be torch.bool, got {mask.dtype}")
    require_broadcastable_to(mask.shape, x.shape, "mask")
    return x.masked_fill(mask, value)
