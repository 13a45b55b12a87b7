"""
Python code generator module.

Generates an Enum of business error codes with exhaustive match-based lookups.
"""

from .generator import PythonGenerator, create_python_generator
from .naming import PYTHON_RESERVED_WORDS, create_python_mapper

__all__ = [
    "PythonGenerator",
    "create_python_generator",
    "create_python_mapper",
    "PYTHON_RESERVED_WORDS",
]
