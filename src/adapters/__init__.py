"""Adaptadores: implementaciones concretas de los contratos del Core (subprocesos)."""
