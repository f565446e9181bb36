import dataclasses
import math

import pytest
import torch

from tensor_ext import AttentionParams, ConfigError


def test_defaults():
    p = AttentionParams()
    assert p.is_causal is False
    assert p.attn_mask is None
    assert p.dropout_p == 0.0
    assert p.scale is None
    assert p.training is False


def test_frozen():
    p = AttentionParams()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.dropout_p = 0.5


@pytest.mark.parametrize("scale", [math.inf, -math.inf, math.nan])
def test_non_finite_scale(scale):
    with pytest.raises(ConfigError):
        AttentionParams(scale=scale)


def test_mask_must_be_tensor():
    with pytest.raises(ConfigError):
        AttentionParams(attn_mask=[[True, False]])


def test_valid_combinations():
    AttentionParams(is_causal=True, dropout_p=0.1, training=True, scale=0.125)
    AttentionParams(attn_mask=torch.ones(2, 2, dtype=torch.bool), dropout_p=0.0)
    AttentionParams(attn_mask=torch.zeros(2, 2))


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        AttentionParams(dropout_p=1.0)
