"""Scoring matrices and calculators."""
