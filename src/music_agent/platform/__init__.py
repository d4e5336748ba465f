"""Adapters for the filesystem, logging, tag codec and model endpoint."""
