"""Helpers for working with strings.

This package provides stateless string helpers, including:
- Capitalization, reversal and occurrence counting
- Character-class predicates (numeric, ASCII, UTF-8/16, letters, case)
- Locale-tolerant numeric and boolean parsing
- "key:value|key:value" to JSON conversion
- Quoted-text extraction
- Arithmetic formula evaluation
"""

from .character_classifier import *
from .expression_calculator import *
from .primitive_parser import *
from .text_transformer import *
