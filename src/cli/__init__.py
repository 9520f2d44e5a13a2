"""Capa CLI: parseo de argumentos, presentación y códigos de salida."""
