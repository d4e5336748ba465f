"""Configuration loading and derived runtime settings."""
