"""Modelos y errores del dominio.

El dominio no conoce HTTP ni la CLI: solo comandos, invocaciones y fallos.
"""
