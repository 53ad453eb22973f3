"""Array-backed doubly linked list with Graphviz and HTML dumps and a command line."""

__version__ = "0.1.0"
__all__ = ["cli", "dump", "linkedlist"]