"""
Murranno wallet withdrawal authorization.

Risk tiering, security gate, PIN challenge and remote submission
for wallet withdrawals.
"""

__version__ = "1.0.0"
