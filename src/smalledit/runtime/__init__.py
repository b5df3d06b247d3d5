"""Runtime services: telemetry and refresh scheduling."""
