"""
Language-specific token tables.
"""

from resx_codegen.languages.csharp import CSharpDialect
from resx_codegen.languages.visualbasic import VisualBasicDialect

__all__ = [
    "CSharpDialect",
    "VisualBasicDialect",
]
