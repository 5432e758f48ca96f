"""Infrastructure layer — concrete sinks backing domain protocols."""
