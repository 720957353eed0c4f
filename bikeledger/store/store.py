"""
This module hosts the base class for all rent stores.
A store must implement all function to be usable.
"""

from abc import ABC, abstractmethod
from typing import List

from bikeledger.models import Rent


class RentStore(ABC):
    """The abstract rent store interface."""

    @abstractmethod
    def open_rents_for(self, user_email: str) -> List[Rent]:
        """
        Gets the rents of the given user that have not ended.
        """
