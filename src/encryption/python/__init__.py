# import core modules
from src.encryption.python.core.registry import register_all_implementations, list_implementations, get_implementation

# import KASUMI implementations
from src.encryption.python.kasumi import (
    KasumiImplementation,
    KasumiCipher,
    new_cipher,
    register_kasumi_implementations,
)

__all__ = [
    'register_all_implementations',
    'list_implementations',
    'get_implementation',
    'KasumiImplementation',
    'KasumiCipher',
    'new_cipher',
    'register_kasumi_implementations',
]
