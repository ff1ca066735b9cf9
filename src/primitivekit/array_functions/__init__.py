"""Helpers for working with lists and other sequences.

This package provides stateless helpers that operate on homogeneous
sequences, including:
- Appending and inserting elements (returning a new list)
- Removing every occurrence of a value (returning a new list)
- Clearing and reversing in place
- Counting and searching by value equality
- None/emptiness predicates
"""

from .sequence_inspectors import *
from .sequence_mutators import *
