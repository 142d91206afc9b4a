"""Shared helpers for :mod:`kurs_pricing`."""
