"""Domaine : entités du catalogue, ports et exceptions."""
