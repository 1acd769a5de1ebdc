"""
Structural data generation.

A dataset is produced by evaluating an ordered list of structural
equations. Each equation sees only the columns generated before it and
draws its noise from its own random stream, spawned from one explicit
seed. The same seed, size and equation list always give a bit-identical
dataframe.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable

import numpy as np
import pandas as pd

from ._exceptions import EquationError, OutOfOrderReferenceError
from .dag import DAG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StructuralEquation:
    """
    One variable of a structural causal model.

    ``fn(data, rng, n)`` must return ``n`` values. ``data`` holds the
    variables generated so far (read-only); ``rng`` is a
    ``numpy.random.Generator`` reserved for this equation's noise.
    ``parents`` lists the variables ``fn`` reads and is checked against
    the equation order before anything is drawn.
    """

    name: str
    fn: Callable[[Mapping[str, np.ndarray], np.random.Generator, int], np.ndarray]
    parents: tuple[str, ...] = ()


class _GeneratedSoFar(Mapping):
    """Read-only view of the columns generated before the current equation."""

    def __init__(self, columns: dict[str, np.ndarray], equation: str) -> None:
        self._columns = columns
        self._equation = equation

    def __getitem__(self, name: str) -> np.ndarray:
        try:
            column = self._columns[name]
        except KeyError:
            raise OutOfOrderReferenceError(
                f"Equation '{self._equation}' reads '{name}', which has not been generated yet. "
                f"Generated so far: {list(self._columns)}",
                equation=self._equation,
                variable=name,
            ) from None
        view = column.view()
        view.flags.writeable = False
        return view

    def __contains__(self, name) -> bool:
        return name in self._columns

    def __iter__(self):
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)


def check_order(equations: list[StructuralEquation]) -> None:
    """
    Validate that every declared parent is generated before the equation
    that reads it, and that no variable is defined twice.

    Raises
    ------
    OutOfOrderReferenceError
        On the first equation whose parent is not defined earlier.
    EquationError
        If two equations share a name.
    """
    seen: set[str] = set()
    for eq in equations:
        if eq.name in seen:
            raise EquationError(
                f"Variable '{eq.name}' is defined by more than one equation.", equation=eq.name
            )
        for parent in eq.parents:
            if parent not in seen:
                raise OutOfOrderReferenceError(
                    f"Equation '{eq.name}' depends on '{parent}', which is not defined "
                    f"by an earlier equation. Reorder the equations so every cause "
                    f"precedes its effects.",
                    equation=eq.name,
                    variable=parent,
                )
        seen.add(eq.name)


def generate(seed: int, n: int, equations: list[StructuralEquation]) -> pd.DataFrame:
    """
    Simulate ``n`` rows from a structural causal model.

    Parameters
    ----------
    seed : int
        Root seed. Each equation gets its own child stream of
        ``numpy.random.SeedSequence(seed)``; global random state is never
        read or modified.
    n : int
        Number of rows.
    equations : list[StructuralEquation]
        Equations in a topological order of the causal graph.

    Returns
    -------
    pd.DataFrame
        One column per equation, in equation order.

    Raises
    ------
    OutOfOrderReferenceError
        If an equation reads a variable that is not generated before it.
        No dataframe is produced.
    EquationError
        If ``seed`` is missing, ``n`` is not positive, or an equation
        returns the wrong number of values.
    """
    if seed is None:
        raise EquationError("A seed is required; pass an integer so the dataset can be reproduced.")
    if n <= 0:
        raise EquationError(f"Sample size must be positive, got {n}.")
    check_order(equations)

    streams = np.random.SeedSequence(seed).spawn(len(equations))
    columns: dict[str, np.ndarray] = {}
    for eq, stream in zip(equations, streams):
        rng = np.random.default_rng(stream)
        values = np.array(eq.fn(_GeneratedSoFar(columns, eq.name), rng, n))
        if values.ndim == 0:
            values = np.full(n, values)
        if values.shape != (n,):
            raise EquationError(
                f"Equation '{eq.name}' returned shape {values.shape}, expected ({n},).",
                equation=eq.name,
            )
        columns[eq.name] = values

    logger.debug("generated %d rows for %s (seed=%s)", n, list(columns), seed)
    return pd.DataFrame(columns)


def structural_dag(equations: list[StructuralEquation]) -> DAG:
    """Causal graph implied by the equations' declared parents."""
    dag = DAG()
    for eq in equations:
        dag.assume(eq.name)
        for parent in eq.parents:
            dag.assume(parent).causes(eq.name)
    return dag
