"""
ListShare: share lists of things with your friends.
"""

__version__ = "0.1.0"
