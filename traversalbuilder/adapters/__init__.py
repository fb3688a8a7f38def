"""Node adapters for specific node representations.

Adapters implement the NodeAdapter interface, letting the same traversal
walk live node handles or REST records.
"""

from .native import NativeNodeAdapter
from .rest import RestNodeAdapter

__all__ = [
    "NativeNodeAdapter",
    "RestNodeAdapter",
]
