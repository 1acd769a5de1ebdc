from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd
import statsmodels.api as sm

from .._exceptions import MissingColumnError, SingularDesignError

logger = logging.getLogger(__name__)

INTERCEPT = "(Intercept)"


@dataclass(frozen=True)
class RegressionSpec:
    """
    One regression to fit: ``response`` on an intercept plus ``covariates``.

    ``robust=True`` reports heteroskedasticity-consistent (HC1) standard
    errors instead of the ordinary OLS ones. ``label`` names the column the
    specification occupies in a display table; it defaults to the
    ``"y ~ a + b"`` formula.
    """

    response: str
    covariates: tuple[str, ...]
    robust: bool = False
    label: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.covariates, str):
            object.__setattr__(self, "covariates", (self.covariates,))
        else:
            object.__setattr__(self, "covariates", tuple(self.covariates))

    @property
    def formula(self) -> str:
        rhs = " + ".join(self.covariates) if self.covariates else "1"
        return f"{self.response} ~ {rhs}"

    @property
    def display_label(self) -> str:
        return self.label if self.label is not None else self.formula


@dataclass(frozen=True)
class CoefficientEstimate:
    """Point estimate and standard error of one regression term."""

    term: str
    estimate: float
    std_err: float


class SpecificationResult:
    """
    The fitted result of one ``RegressionSpec``.

    Estimates are ordered intercept first, then covariates as listed in the
    specification. Index by term name to get a ``CoefficientEstimate``.
    """

    def __init__(self, spec: RegressionSpec, index: int, result) -> None:
        self._spec = spec
        self._index = index
        self._result = result
        self._estimates = [
            CoefficientEstimate(term, float(result.params[term]), float(result.bse[term]))
            for term in (INTERCEPT, *spec.covariates)
        ]

    @property
    def spec(self) -> RegressionSpec:
        return self._spec

    @property
    def index(self) -> int:
        """Position of the specification in the list it was fitted from."""
        return self._index

    @property
    def estimates(self) -> list[CoefficientEstimate]:
        """Intercept first, then covariates in specification order."""
        return list(self._estimates)

    @property
    def terms(self) -> list[str]:
        return [e.term for e in self._estimates]

    @property
    def nobs(self) -> int:
        """Number of observations used in the fit."""
        return int(self._result.nobs)

    @property
    def cov_type(self) -> str:
        """``"HC1"`` for robust fits, ``"nonrobust"`` otherwise."""
        return self._result.cov_type

    @property
    def statsmodels_result(self):
        """The underlying statsmodels result, for full diagnostics."""
        return self._result

    def __contains__(self, term: str) -> bool:
        return term in self.terms

    def __getitem__(self, term: str) -> CoefficientEstimate:
        for estimate in self._estimates:
            if estimate.term == term:
                return estimate
        raise KeyError(f"'{term}' is not a term of {self._spec.formula}")

    def summary(self) -> str:
        lines = [
            "",
            f"OLS: {self._spec.formula}  ({'HC1' if self._spec.robust else 'ordinary'} std. errors)",
            "─" * 50,
        ]
        for e in self._estimates:
            lines.append(f"  {e.term:<20} : {e.estimate:>10.4f}  ({e.std_err:.4f})")
        lines += ["", f"  N                    : {self.nobs:>10d}", ""]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return self.summary()


def _design_matrix(data: pd.DataFrame, spec: RegressionSpec, index: int) -> tuple[pd.Series, pd.DataFrame]:
    for label, var in [("Response", spec.response), *(("Covariate", c) for c in spec.covariates)]:
        if var not in data.columns:
            raise MissingColumnError(
                f"{label} column '{var}' of specification {index} ({spec.formula}) "
                f"not found in dataframe.",
                spec_index=index,
                column=var,
            )

    if len(set(spec.covariates)) != len(spec.covariates):
        dupes = sorted({c for c in spec.covariates if spec.covariates.count(c) > 1})
        raise SingularDesignError(
            f"Specification {index} ({spec.formula}) lists {dupes} more than once; "
            f"the design matrix is not of full column rank.",
            spec_index=index,
            covariates=tuple(dupes),
        )

    y = data[spec.response].astype(float)
    X = pd.DataFrame({INTERCEPT: np.ones(len(data))}, index=data.index)
    for covariate in spec.covariates:
        X[covariate] = data[covariate].astype(float)
    return y, X


def _check_rank(X: pd.DataFrame, spec: RegressionSpec, index: int) -> None:
    """Raise SingularDesignError naming the first column that adds no rank."""
    values = X.to_numpy()
    if np.linalg.matrix_rank(values) == values.shape[1]:
        return

    for k in range(1, values.shape[1] + 1):
        if np.linalg.matrix_rank(values[:, :k]) < k:
            culprit = X.columns[k - 1]
            break
    raise SingularDesignError(
        f"Specification {index} ({spec.formula}) has a rank-deficient design: "
        f"'{culprit}' is a linear combination of the terms before it.",
        spec_index=index,
        covariates=(culprit,),
    )


def fit_spec(data: pd.DataFrame, spec: RegressionSpec, index: int = 0) -> SpecificationResult:
    """
    Fit one specification by OLS.

    Raises
    ------
    SingularDesignError
        If the design matrix is not of full column rank.
    MissingColumnError
        If the response or a covariate is not a column of ``data``.
    """
    y, X = _design_matrix(data, spec, index)
    _check_rank(X, spec, index)

    model = sm.OLS(y, X)
    result = model.fit(cov_type="HC1") if spec.robust else model.fit()
    logger.debug("fitted specification %d: %s (%s)", index, spec.formula, result.cov_type)
    return SpecificationResult(spec, index, result)


def fit_all(data: pd.DataFrame, specs: list[RegressionSpec]) -> list[SpecificationResult]:
    """
    Fit every specification against the same dataset, preserving order.

    The first specification that cannot be fitted aborts the run; its
    error carries the specification index.
    """
    return [fit_spec(data, spec, i) for i, spec in enumerate(specs)]
