"""Importable modules scanned by the declarative configuration tests."""
