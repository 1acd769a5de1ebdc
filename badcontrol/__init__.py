import logging

from .dag import DAG
from .generator import StructuralEquation, generate, structural_dag
from .estimators.ols import RegressionSpec, CoefficientEstimate, SpecificationResult, fit_spec, fit_all
from .reshape import RowBlock, DisplayTable, reshape, format_number
from .pipeline import Scenario, ScenarioResult, ScenarioOutcome, run_scenario, run_all
from ._exceptions import (
    BadControlError, OutOfOrderReferenceError, SingularDesignError, ShapeMismatchError,
    MissingColumnError, EquationError, GraphError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DAG",
    "StructuralEquation", "generate", "structural_dag",
    "RegressionSpec", "CoefficientEstimate", "SpecificationResult", "fit_spec", "fit_all",
    "RowBlock", "DisplayTable", "reshape", "format_number",
    "Scenario", "ScenarioResult", "ScenarioOutcome", "run_scenario", "run_all",
    "BadControlError", "OutOfOrderReferenceError", "SingularDesignError", "ShapeMismatchError",
    "MissingColumnError", "EquationError", "GraphError",
]
