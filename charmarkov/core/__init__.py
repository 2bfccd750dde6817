"""
charmarkov.core

The character-level Markov model.
Contains:
 - per-window statistics (CharCount, FrequencyTable) and their store (ModelStore)
 - training (Trainer) and probability normalization (normalize)
 - weighted sampling (sample, SampleResult) and text extension (Generator)
 - the LanguageModel facade tying them together
"""

from .char_data import CharCount, FrequencyTable
from .model_store import ModelStore
from .normalizer import normalize
from .sampler import SampleResult, sample
from .trainer import Trainer
from .generator import Generator
from .language_model import LanguageModel

__all__ = [
    "CharCount",
    "FrequencyTable",
    "ModelStore",
    "normalize",
    "SampleResult",
    "sample",
    "Trainer",
    "Generator",
    "LanguageModel",
]
