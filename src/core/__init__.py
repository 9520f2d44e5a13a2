"""Core: dominio, configuración, contratos y servicios."""
