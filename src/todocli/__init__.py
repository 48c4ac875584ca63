"""
todocli - a todo list manager backed by a single local JSON file.
"""

__version__ = "0.1.0"
