# -*- coding: utf-8 -*-
"""
app/modules/auth/routes/__init__.py

Ensambla los routers del módulo Auth.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-10
"""

from fastapi import APIRouter

from .register import router as register_router


def get_auth_routers() -> list[APIRouter]:
    """Devuelve todos los routers listos para montar."""
    return [register_router]

# Fin del archivo app/modules/auth/routes/__init__.py
