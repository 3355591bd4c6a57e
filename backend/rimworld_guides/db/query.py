"""Construcción de cláusulas WHERE con parámetros enlazados.

Cada predicado añade su fragmento SQL y sus parámetros en el mismo paso, de
modo que la cantidad de placeholders '?' coincide siempre con len(params).
"""
from __future__ import annotations
from typing import Any, Iterable, List, Tuple

# Columnas que pueden aparecer en un filtro; nunca se interpola otra cosa
GUIDE_FILTER_COLUMNS = frozenset({'category', 'difficulty', 'title', 'description', 'content', 'slug'})


class WhereBuilder:
    def __init__(self, allowed_columns: Iterable[str] = GUIDE_FILTER_COLUMNS) -> None:
        self._allowed = frozenset(allowed_columns)
        self._clauses: List[str] = []
        self._params: List[Any] = []

    def _check(self, column: str) -> str:
        if column not in self._allowed:
            raise ValueError(f"columna no permitida en filtro: {column!r}")
        return column

    def equals(self, column: str, value: Any) -> "WhereBuilder":
        if value is None:
            return self
        self._clauses.append(f"{self._check(column)} = ?")
        self._params.append(value)
        return self

    def contains_any(self, columns: Iterable[str], term: str | None) -> "WhereBuilder":
        """Coincide si term aparece (sin distinguir mayúsculas) en alguna columna.

        Usa instr() sobre casefold() en lugar de LIKE para que '%' y '_' del
        término se traten literalmente. casefold debe estar registrada en la
        conexión (ver Database._connect).
        """
        if term is None:
            return self
        cols = [self._check(c) for c in columns]
        if not cols:
            return self
        parts = [f"instr(casefold({c}), casefold(?)) > 0" for c in cols]
        self._clauses.append("(" + " OR ".join(parts) + ")")
        self._params.extend([term] * len(cols))
        return self

    def sql(self) -> str:
        if not self._clauses:
            return ""
        return " WHERE " + " AND ".join(self._clauses)

    @property
    def params(self) -> Tuple[Any, ...]:
        return tuple(self._params)

    def build(self) -> Tuple[str, Tuple[Any, ...]]:
        return self.sql(), self.params
