from __future__ import annotations
import enum
import math
from dataclasses import dataclass
from typing import Optional
import torch

from tensor_ext.errors import ConfigError


@dataclass(frozen=True, eq=False)
class AttentionParams:
    is_causal: bool = False
    attn_mask: Optional[torch.Tensor] = None  # bool: True = attend; float: added to scores
    dropout_p: float = 0.0
    scale: Optional[float] = None  # if None: 1/sqrt(D)
    training: bool = False

    def __post_init__(self):
        if self.is_causal and self.attn_mask is not None:
            raise ConfigError("is_causal and attn_mask are mutually exclusive")
        if self.attn_mask is not None and not isinstance(self.attn_mask, torch.Tensor):
            raise ConfigError(f"attn_mask must be a torch.Tensor, got {type(self.attn_mask).__name__}")
        if not 0.0 <= self.dropout_p < 1.0:
            raise ConfigError(f"dropout_p must be in [0, 1), got {self.dropout_p}")
        if self.scale is not None and not math.isfinite(self.scale):
            raise ConfigError(f"scale must be finite, got {self.scale}")


class CastPolicy(enum.Enum):
    """How `values_like` coerces a scalar that does not fit the target dtype exactly."""

    STRICT = "strict"      # reject anything that would lose information
    TRUNCATE = "truncate"  # drop the fractional part (integers) or keep truthiness (bool)
