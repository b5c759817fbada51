# -*- coding: utf-8 -*-
"""
app/modules/payments/services/webhooks/payload_paths.py

Resolución de rutas con puntos ("transaction.amount_in_cents") sobre el
árbol JSON del webhook.

Una ruta inexistente devuelve el centinela ABSENT, distinto de la cadena
vacía y de None. La conversión a texto ocurre solo al armar la cadena a
firmar (coerce_to_signature_string).

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-08
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Union

# Árbol JSON: None | bool | int | float | str | list | dict
JsonValue = Union[None, bool, int, float, str, list, dict]


class _Absent:
    """Centinela para rutas que no existen en el payload."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def resolve_path(tree: Any, dotted_path: str) -> Any:
    """
    Recorre el árbol siguiendo la ruta.

    Los diccionarios se recorren por clave y las listas por índice decimal.
    Cualquier segmento que no aplique devuelve ABSENT, nunca lanza.

    >>> resolve_path({"transaction": {"id": "123"}}, "transaction.id")
    '123'
    >>> resolve_path({"transaction": {}}, "transaction.amount_in_cents")
    ABSENT
    """
    node = tree
    for segment in dotted_path.split("."):
        if isinstance(node, dict):
            if segment not in node:
                return ABSENT
            node = node[segment]
        elif isinstance(node, list) and segment.isdigit():
            index = int(segment)
            if index >= len(node):
                return ABSENT
            node = node[index]
        else:
            return ABSENT
    return node


def coerce_to_signature_string(value: Any) -> str:
    """
    Convierte un valor resuelto a su forma textual para el checksum.

    - ABSENT / None → ""
    - bool → "true" / "false"
    - int → decimal
    - float → sin ".0" si es entero; si no, notación decimal sin exponente
    - str → sin cambios
    - listas / objetos → JSON compacto
    """
    if value is ABSENT or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


__all__ = ["ABSENT", "JsonValue", "resolve_path", "coerce_to_signature_string"]

# Fin del archivo app/modules/payments/services/webhooks/payload_paths.py
