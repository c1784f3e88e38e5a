"""Contratos (Protocol) que implementan los adaptadores.

El Core depende de estas abstracciones, no de httpx; los tests inyectan
dobles deterministas.
"""
