"""Block locking, transaction numbering, pin bookkeeping, record schemas and layouts, and query predicates."""

__version__ = "0.1.0"