"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (configuración, parámetros de
  ejecución, clasificación de respuestas).
- El dominio no conoce HTTP ni la CLI: solo conceptos del problema.
"""
