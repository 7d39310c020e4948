"""HTTP server for TaskBoard."""
