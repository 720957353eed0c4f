"""
Handles the rent lookups for the ledger. The registry only ever
queries the open rents of a user through the :class:`RentStore`
contract, so that a persistent, indexed store may replace the
in-memory one without touching the rental logic.
"""

from .memory import MemoryRentStore
from .store import RentStore
