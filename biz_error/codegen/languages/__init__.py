"""
Language-specific code generators.

This module contains the emitters for each supported target language.
"""

from .python import PythonGenerator, create_python_generator

__all__ = ["PythonGenerator", "create_python_generator"]
