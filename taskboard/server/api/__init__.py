"""HTTP API for TaskBoard Server."""
