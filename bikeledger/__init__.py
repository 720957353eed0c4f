"""
The main package for the bike rental ledger.
"""

import logging

from bikeledger.config import ledger_mode

logger = logging.getLogger(__name__)
handler = logging.StreamHandler()
formatter = logging.Formatter('%(asctime)s %(name)-12s %(levelname)-8s %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(logging.DEBUG if ledger_mode == "development" else logging.INFO)
