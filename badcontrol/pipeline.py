"""
Run a scenario end to end: structural generator, specification runner,
result reshaper. Scenarios share nothing, so one failing never affects
another.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pandas as pd

from ._exceptions import BadControlError
from .dag import DAG
from .estimators.ols import RegressionSpec, SpecificationResult, fit_all
from .generator import StructuralEquation, generate
from .reshape import DisplayTable, RowBlock, reshape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scenario:
    """
    Everything needed to reproduce one example: the structural model, the
    regressions fitted to it, and the layout of the comparison table.
    """

    name: str
    seed: int
    n: int
    equations: tuple[StructuralEquation, ...]
    specs: tuple[RegressionSpec, ...]
    rows: tuple[RowBlock, ...]
    columns: tuple[str, ...] | None = None
    sample_size_label: str = "N"
    graph: DAG | None = field(default=None, compare=False)
    title: str = ""


@dataclass
class ScenarioResult:
    scenario: Scenario
    dataset: pd.DataFrame
    results: list[SpecificationResult]
    table: DisplayTable

    def summary(self) -> str:
        from .render.table import to_text
        return to_text(self.table, title=self.scenario.title or self.scenario.name)

    def __repr__(self) -> str:
        return self.summary()


@dataclass
class ScenarioOutcome:
    """What ``run_all()`` reports for one scenario: a result or the error that stopped it."""

    name: str
    result: ScenarioResult | None = None
    error: BadControlError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_scenario(scenario: Scenario, seed: int | None = None) -> ScenarioResult:
    """
    Generate the dataset, fit every specification and build the table.

    ``seed`` overrides the scenario's own seed. Errors from any stage are
    re-raised with ``error.scenario`` set to the scenario name.
    """
    seed = scenario.seed if seed is None else seed
    logger.debug("running scenario %s (seed=%s, n=%d)", scenario.name, seed, scenario.n)
    try:
        dataset = generate(seed, scenario.n, list(scenario.equations))
        results = fit_all(dataset, list(scenario.specs))
        table = reshape(
            results,
            list(scenario.rows),
            columns=None if scenario.columns is None else list(scenario.columns),
            sample_size_label=scenario.sample_size_label,
        )
    except BadControlError as e:
        e.scenario = scenario.name
        raise
    return ScenarioResult(scenario, dataset, results, table)


def run_all(scenarios: list[Scenario]) -> dict[str, ScenarioOutcome]:
    """
    Run each scenario independently. A configuration error in one scenario
    is logged and recorded in its outcome; the others still run.
    """
    outcomes: dict[str, ScenarioOutcome] = {}
    for scenario in scenarios:
        try:
            outcomes[scenario.name] = ScenarioOutcome(scenario.name, result=run_scenario(scenario))
        except BadControlError as e:
            logger.exception("scenario %s failed", scenario.name)
            outcomes[scenario.name] = ScenarioOutcome(scenario.name, error=e)
    return outcomes
