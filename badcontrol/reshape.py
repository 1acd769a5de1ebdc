"""
Pivot fitted specifications into a regression comparison table.

The table layout is declared, never inferred from fit order: the caller
lists the row blocks (one per term, estimate row then standard-error row)
and, optionally, the display order of the specifications. Anything the
declaration cannot place is a ``ShapeMismatchError``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from ._exceptions import ShapeMismatchError
from .estimators.ols import INTERCEPT, SpecificationResult

logger = logging.getLogger(__name__)

DEFAULT_DIGITS = 3


@dataclass(frozen=True)
class RowBlock:
    """A term of the regression and the label its estimate row is shown under."""

    term: str
    label: str | None = None

    @property
    def display_label(self) -> str:
        return self.label if self.label is not None else self.term


@dataclass
class DisplayTable:
    """
    Row-structured table handed to a renderer.

    ``rows`` holds ``(label, cells)`` pairs with one string cell per entry of
    ``columns``. ``emphasis`` is the index of the row a renderer should set
    apart (bold); it is a hint, not data.
    """

    columns: list[str]
    rows: list[tuple[str, list[str]]] = field(default_factory=list)
    emphasis: int | None = None

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.rows]

    def column(self, name: str) -> list[str]:
        """All cells of one specification column, top to bottom."""
        j = self.columns.index(name)
        return [cells[j] for _, cells in self.rows]

    def to_frame(self) -> pd.DataFrame:
        """The table as a dataframe with the row labels in a leading column."""
        frame = pd.DataFrame([cells for _, cells in self.rows], columns=self.columns)
        frame.insert(0, "", self.labels)
        return frame


def format_number(value: float, digits: int = DEFAULT_DIGITS) -> str:
    """
    Format to ``digits`` significant figures in positional notation,
    trimming trailing zeros and a dangling decimal point::

        format_number(-0.98213)  # '-0.982'
        format_number(50.0)      # '50'
    """
    return np.format_float_positional(
        float(value), precision=digits, unique=False, fractional=False, trim="-"
    )


def _as_blocks(rows: list[RowBlock | str]) -> list[RowBlock]:
    blocks = [r if isinstance(r, RowBlock) else RowBlock(r) for r in rows]

    terms = [b.term for b in blocks]
    labels = [b.display_label for b in blocks]
    for kind, names in [("term", terms), ("label", labels)]:
        dupes = sorted({x for x in names if names.count(x) > 1})
        if dupes:
            raise ShapeMismatchError(
                f"Row {kind}s must be unique; {dupes} declared more than once.",
                term=dupes[0] if kind == "term" else None,
            )
    return blocks


def _column_order(
    results: list[SpecificationResult],
    columns: list[str | int] | None,
) -> list[SpecificationResult]:
    if columns is None:
        return list(results)

    by_label: dict[str, SpecificationResult] = {}
    for r in results:
        label = r.spec.display_label
        if label in by_label:
            raise ShapeMismatchError(
                f"Specifications {by_label[label].index} and {r.index} share the column "
                f"label '{label}'; give them distinct labels.",
                spec_index=r.index,
            )
        by_label[label] = r

    ordered: list[SpecificationResult] = []
    for key in columns:
        if isinstance(key, int):
            if not 0 <= key < len(results):
                raise ShapeMismatchError(
                    f"Column {key} does not refer to a fitted specification "
                    f"(0..{len(results) - 1}).",
                    spec_index=key,
                )
            chosen = results[key]
        elif key in by_label:
            chosen = by_label[key]
        else:
            raise ShapeMismatchError(
                f"Column '{key}' does not match any specification label. "
                f"Known labels: {list(by_label)}"
            )
        if any(chosen is r for r in ordered):
            raise ShapeMismatchError(
                f"Specification {chosen.index} is listed twice in the column order.",
                spec_index=chosen.index,
            )
        ordered.append(chosen)

    missing = [r.index for r in results if not any(r is o for o in ordered)]
    if missing:
        raise ShapeMismatchError(
            f"Specifications {missing} are missing from the column order.",
            spec_index=missing[0],
        )
    return ordered


def reshape(
    results: list[SpecificationResult],
    rows: list[RowBlock | str],
    columns: list[str | int] | None = None,
    sample_size_label: str = "N",
    digits: int = DEFAULT_DIGITS,
) -> DisplayTable:
    """
    Build the comparison table for a list of fitted specifications.

    Parameters
    ----------
    results : list[SpecificationResult]
        Output of ``fit_all()``.
    rows : list[RowBlock | str]
        Row blocks in display order. Every term estimated by any
        specification must be declared, except the intercept, which may be
        left out to hide it.
    columns : list[str | int], optional
        Display order of the specifications, by label or by fit index.
        Defaults to fit order.
    sample_size_label : str
        Label of the trailing sample-size row.
    digits : int
        Significant figures for estimates and standard errors.

    Raises
    ------
    ShapeMismatchError
        If a term has no row block, a row block matches no estimate, or the
        row / column declaration is ambiguous or incomplete.
    """
    blocks = _as_blocks(rows)
    declared = {b.term for b in blocks}

    for r in results:
        for term in r.terms:
            if term not in declared and term != INTERCEPT:
                raise ShapeMismatchError(
                    f"Specification {r.index} ({r.spec.formula}) estimates '{term}', "
                    f"which has no row in the table.",
                    spec_index=r.index,
                    term=term,
                )
    for b in blocks:
        if not any(b.term in r for r in results):
            raise ShapeMismatchError(
                f"Row '{b.display_label}' refers to '{b.term}', which no specification estimates.",
                term=b.term,
            )

    ordered = _column_order(results, columns)
    table = DisplayTable(columns=[r.spec.display_label for r in ordered])

    for b in blocks:
        estimates: list[str] = []
        std_errs: list[str] = []
        for r in ordered:
            if b.term in r:
                coef = r[b.term]
                estimates.append(format_number(coef.estimate, digits))
                std_errs.append(f"({format_number(coef.std_err, digits)})")
            else:
                estimates.append("")
                std_errs.append("")
        table.rows.append((b.display_label, estimates))
        table.rows.append(("", std_errs))

    table.rows.append((sample_size_label, [str(r.nobs) for r in ordered]))
    table.emphasis = len(table.rows) - 1

    logger.debug("reshaped %d specifications into %d rows", len(ordered), len(table.rows))
    return table
