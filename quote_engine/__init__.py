"""
Movie Quote Engine.
Matches a free-text description of how someone feels against a collection of movie quotes.
"""

__version__ = "0.1.0"
