"""Configuration, logging and error policy."""
