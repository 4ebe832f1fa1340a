"""
User interface module for the battle engine.
"""
