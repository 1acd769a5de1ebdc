from .ols import RegressionSpec, CoefficientEstimate, SpecificationResult, fit_spec, fit_all

__all__ = ["RegressionSpec", "CoefficientEstimate", "SpecificationResult", "fit_spec", "fit_all"]
