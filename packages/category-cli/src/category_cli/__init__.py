"""Command-line driver for the category tree."""
