"""In-memory storage for spendlog.

The ledger lives for the lifetime of the process; nothing is written to disk.
"""

from spendlog.store.ledger import Ledger

__all__ = ["Ledger"]
