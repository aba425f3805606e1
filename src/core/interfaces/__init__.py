"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los colaboradores concretos.
- Permite invertir dependencias: el cliente depende de abstracciones.
"""
