"""Validation, configuration and reporting helpers."""
