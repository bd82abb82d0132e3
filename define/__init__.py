"""
Define - Command-line dictionary and thesaurus

Looks up a word in one of several pluggable dictionary sources and prints
the normalized result to the terminal.
"""

__version__ = "1.0.0"
__author__ = "Define Contributors"
