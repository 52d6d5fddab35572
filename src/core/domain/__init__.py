"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los tipos del puzzle (entrada del proveedor y documento ipuz),
  los errores y las constantes del formato.
- El dominio no conoce HTTP ni CLI: solo conceptos del problema.
"""
