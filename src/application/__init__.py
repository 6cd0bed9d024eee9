"""Application layer: settings, API and connection handling."""
