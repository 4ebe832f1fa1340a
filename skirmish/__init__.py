"""
Skirmish: a turn-based text battle engine.

Players type free-text commands (attacks and dodges) and a group of monsters
strikes back every few actions, telegraphing each blow one interaction ahead.
"""
