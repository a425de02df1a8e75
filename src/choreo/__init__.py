"""Generic motion sequencing library."""

from .phrase import Hold, Phrase, RampTo, Time, lerp, phrase, wrap_time
from .sequence import Sequence, SequencePhrase, create_sequence

__all__ = [
    "create_sequence",
    "Hold",
    "lerp",
    "Phrase",
    "phrase",
    "RampTo",
    "Sequence",
    "SequencePhrase",
    "Time",
    "wrap_time",
]

__version__ = "0.1.0"
