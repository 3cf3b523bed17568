"""Adapters that feed the estimation core from files."""
