import os

ledger_mode = os.getenv("LEDGER_MODE", "development")
"""The operational mode of the ledger."""

bcrypt_rounds = int(os.getenv("BCRYPT_ROUNDS", "12"))
"""The bcrypt cost factor used when hashing passwords."""
