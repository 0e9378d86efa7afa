"""Short-lived in-memory state for chat views."""
