"""Use cases operating on suggestion reports."""
