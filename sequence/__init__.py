"""
sequence/
---------
Core data layer.  Public API:

    from sequence import SequenceStore, RunStatistics
    from sequence import Renderer, NullRenderer
    from sequence import Cancelled, InvalidState, InvalidArgument
"""

from sequence.errors   import SortEngineError, Cancelled, InvalidState, InvalidArgument
from sequence.renderer import Renderer, NullRenderer
from sequence.store    import SequenceStore, RunStatistics, three_way

__all__ = [
    "SortEngineError", "Cancelled", "InvalidState", "InvalidArgument",
    "Renderer",        "NullRenderer",
    "SequenceStore",   "RunStatistics", "three_way",
]
