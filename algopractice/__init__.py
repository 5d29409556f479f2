"""Classic algorithm and data-structure exercises: arrays, strings, linked
lists, trees, an LRU cache, bit counting, sorting, prefix sums and dynamic
programming."""

__version__ = "0.1.0"