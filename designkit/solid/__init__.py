"""SOLID principle lessons.

Each module pairs a rendition that breaks the principle with one that follows
it, and exposes a ``demo()`` that prints both.
"""
