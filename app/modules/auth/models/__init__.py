# -*- coding: utf-8 -*-
"""
app/modules/auth/models/__init__.py

Modelos ORM del módulo Auth.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from .identity_models import AuthIdentity
from .user_models import UserAccount

__all__ = ["AuthIdentity", "UserAccount"]

# Fin del archivo app/modules/auth/models/__init__.py
