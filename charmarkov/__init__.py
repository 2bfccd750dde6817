"""charmarkov - character-level Markov text generation."""

from charmarkov.core.language_model import LanguageModel
from charmarkov.utils.config_manager import Config, ConfigError

__all__ = ["LanguageModel", "Config", "ConfigError"]

__version__ = "0.1.0"
