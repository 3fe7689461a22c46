"""
C# syntax tree viewer core.

Parses C# source into a full-fidelity syntax tree, materializes it into a
display tree and inspects the properties of a selected element.
"""

__version__ = "0.1.0"
