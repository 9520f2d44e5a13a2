"""Servicios del Core: orquestan adaptadores sin efectos de presentación."""
