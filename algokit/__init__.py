"""Classic algorithms and data structures: sorting, searching, text, trees, graphs, puzzles and CRC."""

__version__ = "0.1.0"