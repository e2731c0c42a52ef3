"""
Skirmish - attack resolution and turn timer for a playing-card duel.

The package picks the attack mode and damage for the attacking card, keeps
the legal target set in sync with the opponent board, runs the turn
countdown that closes the attack popup, gates the sacrifice action and
shows the attack result.
"""

__version__ = "0.1.0"
