"""weekplan - personal task manager with capacity-aware auto-scheduling."""
