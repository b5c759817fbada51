# -*- coding: utf-8 -*-
"""
app/shared/__init__.py

Infraestructura compartida: configuración, base de datos, errores de
dominio y utilidades.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-05
"""
