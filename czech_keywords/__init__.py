"""
czech-keywords - keyword extraction from Czech documents.

Ranks the words of a single plain-text document by how often they occur in it
relative to how common they are in a reference corpus of the language
(SYN2015 word frequencies by default).
"""

__version__ = "1.0.0"
