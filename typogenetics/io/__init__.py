"""
I/O modules for typogenetics.
"""

from .output import (
    ProcessResult,
    results_to_frame,
)
from .strand_key import (
    StrandRecord,
    load_strand_key,
)

__all__ = [
    'StrandRecord',
    'load_strand_key',
    'ProcessResult',
    'results_to_frame',
]
