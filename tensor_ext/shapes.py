from __future__ import annotations
from typing import Sequence, Tuple
import torch

from tensor_ext.errors import ShapeError


def broadcast_shapes(*shapes: Sequence[int]) -> Tuple[int, ...]:
    """Broadcast shapes by aligning trailing dims and stretching size-1 dims.

    Raises ShapeError when two dims differ and neither is 1.
    """
    ndim = max((len(s) for s in shapes), default=0)
    out = [1] * ndim
    for shape in shapes:
        offset = ndim - len(shape)
        for i, size in enumerate(shape):
            if size < 0:
                raise ShapeError(f"negative dimension in shape {tuple(shape)}")
            cur = out[offset + i]
            if cur == 1:
                out[offset + i] = size
            elif size != 1 and size != cur:
                raise ShapeError(
                    f"shapes {[tuple(s) for s in shapes]} are not broadcast-compatible "
                    f"(dim {offset + i - ndim}: {cur} vs {size})"
                )
    return tuple(out)


def require_ndim(t: torch.Tensor, ndim: int, name: str = "tensor") -> None:
    if t.ndim < ndim:
        raise ShapeError(f"{name} must have at least {ndim} dims, got shape {tuple(t.shape)}")


def require_broadcastable_to(shape: Sequence[int], target: Sequence[int], name: str = "tensor") -> None:
    """Check that `shape` broadcasts to `target` without enlarging it."""
    if len(shape) > len(target) or broadcast_shapes(shape, target) != tuple(target):
        raise ShapeError(f"{name} of shape {tuple(shape)} does not broadcast to {tuple(target)}")
