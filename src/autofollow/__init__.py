# src/autofollow/__init__.py
"""
AutoFollow - reactive follow-movement controller for a single controlled agent.
"""

__version__ = "1.0.0"
