"""
Provides a simple in-memory implementation of the rent store,
for testing and mocking purposes.
"""

from .store import MemoryRentStore
