"""PokerStars hand history parsing."""
