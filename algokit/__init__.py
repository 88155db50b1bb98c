"""Graph traversals, linked lists, string and array puzzles, binary trees and a B+ tree."""

__version__ = "0.1.0"