"""HTTP handlers for the dashboard endpoints."""
