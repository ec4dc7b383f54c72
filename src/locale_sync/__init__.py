"""
locale-sync: fill missing keys in JSON locale files using an AI translator
"""

__version__ = "1.0.0"
