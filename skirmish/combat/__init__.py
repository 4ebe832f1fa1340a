"""
Combat system module for the battle engine.

This module handles the battle loop: player attacks and dodges, weighted
monster targeting and the two-step monster strike-back.
"""
