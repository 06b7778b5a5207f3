"""Configuration and external service clients."""
