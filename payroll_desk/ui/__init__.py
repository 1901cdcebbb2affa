"""Couche de présentation PyQt6."""
