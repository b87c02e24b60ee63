"""Feature packages of complexity-engine."""
