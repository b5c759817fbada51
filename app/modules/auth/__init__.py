# -*- coding: utf-8 -*-
"""
app/modules/auth/__init__.py

Módulo de registro y credenciales.

Estructura:
- models: UserAccount, AuthIdentity
- schemas: requests/responses del registro y snapshots
- services: proveedor de identidad, emisión de tokens y flujo de registro
- routes: get_auth_routers() para montar en app.main

No se importan submódulos aquí: payments depende de models/schemas de auth
y auth depende de payments para el canje.
"""

# Fin del archivo app/modules/auth/__init__.py
