"""Landlordly - client-local state layer for the tenant/landlord rent portal."""

__version__ = "0.1.0"
