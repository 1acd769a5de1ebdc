"""
Gender discrimination and occupation: controlling for a mediator that is
also a collider.

Discrimination lowers wages directly and by pushing women into worse
occupations. Occupation also depends on unobserved ability, which raises
wages. Conditioning on occupation opens the path
discrim → occupation ← ability → wage, so the "controlled" estimate is
further from the direct effect (-1) than is the total effect (-3).
Only adding ability recovers the direct effect.
"""
from __future__ import annotations

from ..dag import DAG, UNOBSERVED
from ..estimators.ols import RegressionSpec
from ..generator import StructuralEquation
from ..pipeline import Scenario
from ..reshape import RowBlock

SEED = 8
N = 10_000

EQUATIONS = (
    StructuralEquation("female", lambda d, rng, n: rng.binomial(1, 0.5, size=n)),
    StructuralEquation("ability", lambda d, rng, n: rng.normal(size=n)),
    StructuralEquation("discrim", lambda d, rng, n: d["female"], parents=("female",)),
    StructuralEquation(
        "occupation",
        lambda d, rng, n: 1 + 2 * d["ability"] - 2 * d["discrim"] + rng.normal(size=n),
        parents=("ability", "discrim"),
    ),
    StructuralEquation(
        "wage",
        lambda d, rng, n: 1 + 2 * d["ability"] - d["discrim"] + d["occupation"] + rng.normal(size=n),
        parents=("ability", "discrim", "occupation"),
    ),
)

SPECS = (
    RegressionSpec("wage", ("discrim",), label="Biased Unconditional"),
    RegressionSpec("wage", ("discrim", "occupation"), label="Biased"),
    RegressionSpec("wage", ("discrim", "occupation", "ability"), label="Unbiased Conditional"),
)

ROWS = (
    RowBlock("discrim", "Discrimination"),
    RowBlock("occupation", "Occupation"),
    RowBlock("ability", "Ability"),
    RowBlock("(Intercept)", "Constant"),
)


def make_graph() -> DAG:
    dag = DAG()
    dag.assume("female").causes("discrim")
    dag.assume("discrim").causes("occupation", "wage")
    dag.assume("occupation").causes("wage")
    dag.assume("ability").causes("occupation", "wage", style=UNOBSERVED)
    return dag


GENDER = Scenario(
    name="gender",
    seed=SEED,
    n=N,
    equations=EQUATIONS,
    specs=SPECS,
    rows=ROWS,
    graph=make_graph(),
    title="Wage regressions: discrimination, occupation and ability",
)
