"""Text and sorting exercises: word interleaving, merged word ordering and classic sorts."""

__version__ = "0.1.0"
__all__ = ["interleave", "merge_words", "sorting"]