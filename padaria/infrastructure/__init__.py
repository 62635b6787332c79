"""Infrastructure - configuration, logging and the activity log."""
