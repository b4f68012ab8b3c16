"""Text and JSON rendering of command results."""
