"""A small terminal text editor with undo/redo and autosave."""

__version__ = "0.1.0"
__all__ = ["__version__"]