"""
File: __init__.py
Description: Scatterplay correlation and regression explorer
"""

__version__ = "0.1.0"
