"""
File: models/__init__.py
Description: Data model and statistics for the scatter plot explorer
"""
