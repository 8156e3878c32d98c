"""API layer — HTTP server, form coercion, display formatting."""
