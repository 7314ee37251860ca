"""Core logic for tally: digits, counters, and configuration."""
