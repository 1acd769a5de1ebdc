"""
Selection on a collider: beauty, talent and movie stars.

Beauty and talent are independent. Stardom goes to the top 15% by their
sum, so among stars the two are negatively correlated. Conditioning on
``star`` in a regression does the same thing to the full sample.
"""
from __future__ import annotations

import numpy as np
import pandas as pd
import statsmodels.api as sm

from ..dag import DAG
from ..estimators.ols import RegressionSpec
from ..generator import StructuralEquation
from ..pipeline import Scenario
from ..reshape import RowBlock

SEED = 3444
N = 2_500
STAR_QUANTILE = 0.85

EQUATIONS = (
    StructuralEquation("beauty", lambda d, rng, n: rng.normal(size=n)),
    StructuralEquation("talent", lambda d, rng, n: rng.normal(size=n)),
    StructuralEquation("score", lambda d, rng, n: d["beauty"] + d["talent"], parents=("beauty", "talent")),
    StructuralEquation(
        "star", lambda d, rng, n: d["score"] > np.quantile(d["score"], STAR_QUANTILE), parents=("score",)
    ),
)

SPECS = (
    RegressionSpec("beauty", ("talent",), label="Unconditional"),
    RegressionSpec("beauty", ("talent", "star"), label="Conditional on star"),
)

ROWS = (
    RowBlock("talent", "Talent"),
    RowBlock("star", "Star"),
    RowBlock("(Intercept)", "Constant"),
)

COLUMNS = ("Conditional on star", "Unconditional")


def make_graph() -> DAG:
    dag = DAG()
    dag.assume("beauty").causes("score")
    dag.assume("talent").causes("score")
    dag.assume("score").causes("star")
    return dag


def conditional_correlation(data: pd.DataFrame, a: str, b: str, where: str | None = None) -> float:
    """Pearson correlation of ``a`` and ``b``, restricted to rows where ``where`` is true."""
    rows = data if where is None else data[data[where].astype(bool)]
    if len(rows) < 3:
        raise ValueError(f"Too few rows ({len(rows)}) where '{where}' holds to compute a correlation.")
    return float(np.corrcoef(rows[a], rows[b])[0, 1])


def scatter_data(data: pd.DataFrame) -> tuple[pd.DataFrame, tuple[float, float]]:
    """
    Points for the beauty / talent scatter, marked by ``star``, and the
    reference line ``(intercept, slope)`` of ``beauty ~ talent`` among stars.
    """
    points = data[["talent", "beauty", "star"]]
    stars = points[points["star"]]
    fit = sm.OLS(stars["beauty"], sm.add_constant(stars["talent"], prepend=True)).fit()
    return points, (float(fit.params["const"]), float(fit.params["talent"]))


SELECTION = Scenario(
    name="selection",
    seed=SEED,
    n=N,
    equations=EQUATIONS,
    specs=SPECS,
    rows=ROWS,
    columns=COLUMNS,
    graph=make_graph(),
    title="Beauty on talent, with and without conditioning on stardom",
)
