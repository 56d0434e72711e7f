"""Classic algorithms and data structures: sorts, heaps, lists, trees, string
search, small puzzles, a 2048 board, a reader/writer lock and PCA."""

__version__ = "0.1.0"