# -*- coding: utf-8 -*-
"""
app/__init__.py

Paquete principal del backend Qué hay Pa' hoy.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-05
"""

# Fin del archivo app/__init__.py
