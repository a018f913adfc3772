"""Domain model: enums, symbol configuration and encode results."""
