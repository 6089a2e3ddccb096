"""Command line interface for docker-env."""
