"""Core modules: configuration, errors, logging, models, providers and services."""
