"""
CatalogScope - interactive viewer for an identifier catalog.

Search the catalog incrementally, see matches highlighted and scrolled
into view, and lock sets of matches so they stay marked.
"""

__version__ = "1.0.0"
