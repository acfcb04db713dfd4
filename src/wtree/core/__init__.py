"""Core functionality for wtree."""
