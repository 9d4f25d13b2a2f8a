"""Screen sampling backends."""

from .frame_sampler import FrameSampler

__all__ = ["FrameSampler"]
