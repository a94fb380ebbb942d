"""Contratos que el Core espera de los adaptadores.

Hoy solo `ChatClient`: el bucle de ejecución lo usa sin saber si detrás hay
httpx o un cliente falso de tests.
"""
