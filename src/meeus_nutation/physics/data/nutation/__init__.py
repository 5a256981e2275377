"""Coefficient tables for the nutation series."""
