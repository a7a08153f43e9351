from .bucket import Bucket, BucketKey
from .charset import ALPHANUMERIC, Alphabet, CharacterSet, default_alphabet, validate_character_set
from .errors import (
    BucketMismatchError,
    ConfigurationError,
    ExhaustionError,
    LexoRankError,
    MalformedKeyError,
    OrderingError,
)
from .generator import KeyGenerator
from .models import BucketConfig, GeneratorConfig

__all__ = [
    "ALPHANUMERIC",
    "Alphabet",
    "Bucket",
    "BucketConfig",
    "BucketKey",
    "BucketMismatchError",
    "CharacterSet",
    "ConfigurationError",
    "ExhaustionError",
    "GeneratorConfig",
    "KeyGenerator",
    "LexoRankError",
    "MalformedKeyError",
    "OrderingError",
    "default_alphabet",
    "validate_character_set",
]
