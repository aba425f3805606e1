"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2): héroes y fallos.
- El dominio no conoce la CLI ni cómo se construye el cliente HTTP.
"""
