"""
Weighted random URL redirector.

Maps a keyword to a list of destination URLs and redirects each request
to one of them, chosen according to configured probability weights.
"""

__version__ = "1.0.0"
