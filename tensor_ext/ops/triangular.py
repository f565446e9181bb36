from __future__ import annotations
from typing import Optional, Union
import torch

from tensor_ext.shapes import require_ndim


def _offsets(rows: int, cols: int, device) -> torch.Tensor:
    # offsets[i, j] = j - i
    i = torch.arange(rows, device=device).unsqueeze(-1)
    j = torch.arange(cols, device=device).unsqueeze(0)
    return j - i


def triu_mask(rows: int, cols: int, diagonal: int = 0, *,
              device: Optional[Union[str, torch.device]] = None) -> torch.Tensor:
    """Boolean (rows, cols) mask, True where j - i >= diagonal."""
    return _offsets(rows, cols, device) >= diagonal


def tril_mask(rows: int, cols: int, diagonal: int = 0, *,
              device: Optional[Union[str, torch.device]] = None) -> torch.Tensor:
    """Boolean (rows, cols) mask, True where j - i <= diagonal."""
    return _offsets(rows, cols, device) <= diagonal


def _apply(x: torch.Tensor, keep: torch.Tensor) -> torch.Tensor:
    # keep is (rows, cols) and broadcasts over the leading dims
    return torch.where(keep, x, torch.zeros((), dtype=x.dtype, device=x.device))


def triu(x: torch.Tensor, diagonal: int = 0) -> torch.Tensor:
    require_ndim(x, 2, "triu input")
    rows, cols = x.shape[-2:]
    return _apply(x, triu_mask(rows, cols, diagonal, device=x.device))


def tril(x: torch.Tensor, diagonal: int = 0) -> torch.Tensor:
    require_ndim(x, 2, "tril input")
    rows, cols = x.shape[-2:]
    return _apply(x, tril_mask(rows, cols, diagonal, device=x.device))
