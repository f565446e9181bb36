from __future__ import annotations
import torch

from tensor_ext.errors import ShapeError


def outer(vec1: torch.Tensor, vec2: torch.Tensor) -> torch.Tensor:
    if vec1.ndim != 1 or vec2.ndim != 1:
        raise ShapeError(f"outer expects 1-D inputs, got {tuple(vec1.shape)} and {tuple(vec2.shape)}")
    # (N,1) * (1,M) -> (N,M)
    return vec1.unsqueeze(-1) * vec2.unsqueeze(0)
