"""doxbook: API documents from source comments, registered into a book."""

__version__ = "0.1.0"
