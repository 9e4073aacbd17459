"""
Walletfy: local personal finance tracker.

Records dated income/expense events and derives a monthly running balance
from a user-supplied initial amount. All data stays on the local machine.
"""

__version__ = "0.1.0"
