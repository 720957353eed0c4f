from typing import List, Optional

from bikeledger.models import Rent
from bikeledger.store.store import RentStore


class MemoryRentStore(RentStore):
    """
    Emulates a database by doing all the operations in memory.

    The store may be given an existing list of rents, in which case
    it reads from (and appends to) that list.
    """

    def __init__(self, rents: Optional[List[Rent]] = None):
        self._rents = rents if rents is not None else []

    def add_rent(self, rent: Rent):
        self._rents.append(rent)

    def open_rents_for(self, user_email: str) -> List[Rent]:
        return [rent for rent in self._rents if rent.user.email == user_email and rent.is_open]
