# -*- coding: utf-8 -*-
"""
app/shared/utils/saga.py

Saga mínima con compensación.

Cada paso declara una acción y, opcionalmente, la compensación que deshace
su efecto. Si un paso falla, se ejecutan las compensaciones de los pasos ya
completados en orden inverso y se relanza el error original. Un fallo de
compensación se registra y no oculta el error original.

Autor: Equipo Qué hay Pa' hoy
Fecha: 2026-10-07
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

# La acción recibe el contexto compartido y devuelve un resultado opcional
SagaAction = Callable[[Dict[str, Any]], Awaitable[Any]]


@dataclass
class SagaStep:
    name: str
    action: SagaAction
    compensation: Optional[SagaAction] = None


@dataclass
class Saga:
    """
    Ejecuta pasos en orden con compensación inversa ante fallo.

    El resultado de cada paso se guarda en ``context[step.name]`` para que
    los pasos posteriores (y las compensaciones) puedan leerlo.
    """

    name: str
    steps: List[SagaStep] = field(default_factory=list)

    def add_step(
        self,
        name: str,
        action: SagaAction,
        compensation: Optional[SagaAction] = None,
    ) -> "Saga":
        self.steps.append(SagaStep(name=name, action=action, compensation=compensation))
        return self

    async def run(self, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ctx: Dict[str, Any] = context if context is not None else {}
        completed: List[SagaStep] = []

        for step in self.steps:
            try:
                ctx[step.name] = await step.action(ctx)
            except BaseException as exc:  # incluye la cancelación del request
                logger.warning(
                    f"[saga:{self.name}] paso '{step.name}' falló "
                    f"({type(exc).__name__}); compensando {len(completed)} paso(s)"
                )
                await self._compensate(completed, ctx)
                raise
            completed.append(step)

        return ctx

    async def _compensate(self, completed: List[SagaStep], ctx: Dict[str, Any]) -> None:
        for step in reversed(completed):
            if step.compensation is None:
                continue
            try:
                await step.compensation(ctx)
                logger.info(f"[saga:{self.name}] compensación '{step.name}' aplicada")
            except Exception as comp_exc:
                logger.error(
                    f"[saga:{self.name}] compensación '{step.name}' falló: {comp_exc}",
                    exc_info=True,
                )


__all__ = ["Saga", "SagaStep", "SagaAction"]

# Fin del archivo app/shared/utils/saga.py
