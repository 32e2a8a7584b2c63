"""Session helpers for the externally authenticated user."""
