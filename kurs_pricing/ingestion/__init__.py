"""Exchange rate providers for :mod:`kurs_pricing`."""
