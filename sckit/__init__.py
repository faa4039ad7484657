"""Small building blocks: CRC-32C, min-heap, dynamic array, INI parsing and a linked list."""

__version__ = "2.0.0"

__all__ = ["array", "crc32", "heap", "ini", "linkedlist"]