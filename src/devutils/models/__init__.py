"""Pydantic domain models shared by the tools, the ledger and the API."""
