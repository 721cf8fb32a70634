"""Configuration for the toolkit facade.

Defines the defaults used by Toolkit when a call does not override them.
"""

from __future__ import annotations

from dataclasses import dataclass

from .types import MidpointBias


@dataclass
class ToolkitConfig:
    """Configuration parameters for the Toolkit facade.

    Attributes:
        recursive: Use the recursive traversal and insertion variants
            instead of the explicit-container ones
        midpoint_bias: Center node reported by find_midpoint on even lengths
        seed: Seed for the facade's pseudo-random source (None = unseeded)
    """

    recursive: bool = False
    midpoint_bias: MidpointBias = MidpointBias.LOWER
    seed: int | None = None
