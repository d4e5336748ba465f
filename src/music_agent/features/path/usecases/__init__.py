"""Path use cases."""
