"""Multi-merchant food storefront: delivery quoting and checkout aggregation."""

__version__ = "1.0.0"
