"""Códigos de salida del proceso."""

SUCCESS = 0
FAILURE = 1
