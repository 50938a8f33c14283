import logging

# configure logging
logger = logging.getLogger("PythonCore")
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

# import components
from .registry import register_implementation, get_implementation, list_implementations, register_all_implementations

__all__ = [
    'register_implementation',
    'get_implementation',
    'list_implementations',
    'register_all_implementations',
]
