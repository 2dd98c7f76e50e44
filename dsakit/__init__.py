"""Classic data structures and algorithms: arrays, searching, sorting, linked
lists, stacks, queues, binary search trees and a boarding-group list."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "boarding",
    "doubly",
    "queues",
    "searching",
    "singly",
    "sorting",
    "stacks",
    "trees",
]