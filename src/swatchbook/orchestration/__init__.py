"""Session orchestration layer.

Builds the palette state engine from configuration and connects it to the
screen sampler and palette store.
"""

from .session import PickerSession

__all__ = ["PickerSession"]
