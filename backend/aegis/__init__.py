"""Aegis patient-monitoring backend."""
