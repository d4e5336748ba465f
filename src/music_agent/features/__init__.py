"""Feature packages: suggestion pipeline and output path allocation."""
