"""Numeric constants for Modulator generators."""
