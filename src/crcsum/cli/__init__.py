"""Command-line interface for crcsum."""
