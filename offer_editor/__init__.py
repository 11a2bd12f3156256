"""Interactive editor for the offer catalog and payout schedule."""

__version__ = "1.0.0"
