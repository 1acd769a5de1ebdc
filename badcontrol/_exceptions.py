from __future__ import annotations


class BadControlError(Exception):
    """
    Base class for configuration errors raised by the simulation pipeline.

    Every error carries the name of the scenario it was raised in once it
    has passed through ``run_scenario()``; before that ``scenario`` is ``None``.
    """

    def __init__(self, message: str, *, scenario: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.scenario = scenario

    def __str__(self) -> str:
        if self.scenario is None:
            return self.message
        return f"[{self.scenario}] {self.message}"


class OutOfOrderReferenceError(BadControlError):
    """
    Raised when a structural equation reads a variable that has not been
    generated yet. Equations must be listed in a topological order of the
    causal graph.
    """

    def __init__(self, message: str, *, equation: str, variable: str, scenario: str | None = None) -> None:
        super().__init__(message, scenario=scenario)
        self.equation = equation
        self.variable = variable


class SingularDesignError(BadControlError):
    """Raised when a regression design matrix is not of full column rank."""

    def __init__(
        self,
        message: str,
        *,
        spec_index: int,
        covariates: tuple[str, ...],
        scenario: str | None = None,
    ) -> None:
        super().__init__(message, scenario=scenario)
        self.spec_index = spec_index
        self.covariates = covariates


class ShapeMismatchError(BadControlError):
    """
    Raised when estimates cannot be placed in the declared display table:
    a term with no row block, a row block no specification estimates, or
    an ambiguous row / column declaration.
    """

    def __init__(
        self,
        message: str,
        *,
        spec_index: int | None = None,
        term: str | None = None,
        scenario: str | None = None,
    ) -> None:
        super().__init__(message, scenario=scenario)
        self.spec_index = spec_index
        self.term = term


class GraphError(Exception):
    """Raised when the DAG is structurally invalid."""
    pass


class MissingColumnError(BadControlError, ValueError):
    """Raised when a regression names a response or covariate the dataset does not have."""

    def __init__(self, message: str, *, spec_index: int, column: str, scenario: str | None = None) -> None:
        super().__init__(message, scenario=scenario)
        self.spec_index = spec_index
        self.column = column


class EquationError(BadControlError, ValueError):
    """
    Raised when a structural model is malformed: a variable defined twice,
    a non-positive sample size, or an equation returning the wrong number
    of values.
    """

    def __init__(self, message: str, *, equation: str | None = None, scenario: str | None = None) -> None:
        super().__init__(message, scenario=scenario)
        self.equation = equation
