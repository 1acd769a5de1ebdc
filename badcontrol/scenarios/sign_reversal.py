"""
Sign reversal from conditioning on a collider.

Treatment ``d`` raises ``y`` by 50. ``x`` is caused by both ``d`` and
``y``. Regressing ``y`` on ``d`` alone recovers the effect; adding ``x``
wipes it out, because given ``x`` a treated unit must have had a lower
``y`` to reach the same ``x``. ``z`` is pure noise and ``k`` is the
running variable that assigns treatment.
"""
from __future__ import annotations

from ..dag import DAG
from ..estimators.ols import RegressionSpec
from ..generator import StructuralEquation
from ..pipeline import Scenario
from ..reshape import RowBlock

SEED = 541
N = 2_500
THRESHOLD = 12

EQUATIONS = (
    StructuralEquation("z", lambda d, rng, n: rng.normal(size=n)),
    StructuralEquation("k", lambda d, rng, n: rng.normal(10, 4, size=n)),
    StructuralEquation("d", lambda d, rng, n: (d["k"] >= THRESHOLD).astype(int), parents=("k",)),
    StructuralEquation(
        "y", lambda d, rng, n: 50 * d["d"] + 100 + rng.normal(size=n), parents=("d",)
    ),
    StructuralEquation(
        "x", lambda d, rng, n: 50 * d["d"] + d["y"] + rng.normal(50, 1, size=n), parents=("d", "y")
    ),
)

SPECS = (
    RegressionSpec("y", ("d",), robust=True, label="y ~ d"),
    RegressionSpec("y", ("x",), robust=True, label="y ~ x"),
    RegressionSpec("y", ("d", "x"), robust=True, label="y ~ d + x"),
)

ROWS = (
    RowBlock("d"),
    RowBlock("x"),
    RowBlock("(Intercept)", "Constant"),
)


def make_graph() -> DAG:
    dag = DAG()
    dag.assume("z")
    dag.assume("k").causes("d")
    dag.assume("d").causes("y", "x")
    dag.assume("y").causes("x")
    return dag


SIGN_REVERSAL = Scenario(
    name="sign_reversal",
    seed=SEED,
    n=N,
    equations=EQUATIONS,
    specs=SPECS,
    rows=ROWS,
    graph=make_graph(),
    title="Conditioning on x, a child of both d and y (HC1 std. errors)",
)
