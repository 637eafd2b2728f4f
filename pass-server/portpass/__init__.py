"""Port pass issuance store and daily reporting."""

__version__ = "0.1.0"
