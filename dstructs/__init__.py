"""Classic data structures and algorithms: graphs, heaps, linked lists, search trees, Huffman trees, hashing and string matching."""

__version__ = "0.1.0"