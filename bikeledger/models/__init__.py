"""
The models package contains all the models used by the ledger.

.. autoclasstree:: bikeledger.models
"""

from .bike import Bike
from .location import Location
from .rent import Rent
from .user import User
