import numpy as np
import pandas as pd
import pytest

from badcontrol import (
    DisplayTable, RegressionSpec, RowBlock, ShapeMismatchError, fit_all, format_number, reshape,
)


N = 500


def make_results():
    rng = np.random.default_rng(0)
    a = rng.normal(size=N)
    b = rng.normal(size=N)
    y = 1 + a - b + rng.normal(size=N)
    df = pd.DataFrame({"a": a, "b": b, "y": y})
    specs = [
        RegressionSpec("y", ("a",), label="short"),
        RegressionSpec("y", ("a", "b"), label="long"),
    ]
    return fit_all(df, specs)


ROWS = [RowBlock("a", "Alpha"), RowBlock("b"), RowBlock("(Intercept)", "Constant")]


class TestFormatNumber:
    def test_significant_figures(self):
        assert format_number(-0.98213) == "-0.982"
        assert format_number(1 / 3) == "0.333"
        assert format_number(123.456) == "123"

    def test_trailing_zeros_trimmed(self):
        assert format_number(50.0) == "50"
        assert format_number(0.5) == "0.5"
        assert format_number(-3.0) == "-3"

    def test_digits(self):
        assert format_number(1 / 3, digits=5) == "0.33333"


class TestReshapeShape:
    def test_row_and_column_counts(self):
        table = reshape(make_results(), ROWS)
        assert len(table.rows) == 2 * len(ROWS) + 1
        assert table.columns == ["short", "long"]
        assert all(len(cells) == 2 for _, cells in table.rows)

    def test_labels_in_declared_order(self):
        table = reshape(make_results(), ROWS)
        assert table.labels == ["Alpha", "", "b", "", "Constant", "", "N"]

    def test_std_err_row_in_parentheses(self):
        results = make_results()
        table = reshape(results, ROWS)
        est = table.rows[0][1][1]
        se = table.rows[1][1][1]
        assert est == format_number(results[1]["a"].estimate)
        assert se == f"({format_number(results[1]['a'].std_err)})"

    def test_absent_term_renders_empty_cells(self):
        table = reshape(make_results(), ROWS)
        assert table.rows[2][1][0] == ""
        assert table.rows[3][1][0] == ""
        assert table.rows[2][1][1] != ""

    def test_sample_size_row_is_last_and_emphasised(self):
        table = reshape(make_results(), ROWS, sample_size_label="Observations")
        assert table.rows[-1] == ("Observations", [str(N), str(N)])
        assert table.emphasis == len(table.rows) - 1

    def test_cells_are_strings(self):
        table = reshape(make_results(), ROWS)
        assert all(isinstance(c, str) for _, cells in table.rows for c in cells)

    def test_intercept_may_be_hidden(self):
        table = reshape(make_results(), ROWS[:2])
        assert "Constant" not in table.labels
        assert len(table.rows) == 5

    def test_plain_strings_as_rows(self):
        table = reshape(make_results(), ["a", "b"])
        assert table.labels[0] == "a"


class TestReshapeColumns:
    def test_reorder_by_label(self):
        table = reshape(make_results(), ROWS, columns=["long", "short"])
        assert table.columns == ["long", "short"]
        assert table.column("short")[2] == ""

    def test_reorder_by_index(self):
        table = reshape(make_results(), ROWS, columns=[1, 0])
        assert table.columns == ["long", "short"]

    def test_missing_column_raises(self):
        with pytest.raises(ShapeMismatchError, match="missing from the column order"):
            reshape(make_results(), ROWS, columns=["long"])

    def test_repeated_column_raises(self):
        with pytest.raises(ShapeMismatchError, match="listed twice"):
            reshape(make_results(), ROWS, columns=["long", 1])

    def test_unknown_label_raises(self):
        with pytest.raises(ShapeMismatchError, match="does not match"):
            reshape(make_results(), ROWS, columns=["long", "medium"])

    def test_index_out_of_range_raises(self):
        with pytest.raises(ShapeMismatchError, match="does not refer"):
            reshape(make_results(), ROWS, columns=[0, 2])


class TestReshapeMismatch:
    def test_undeclared_term_raises(self):
        with pytest.raises(ShapeMismatchError, match="'b'") as info:
            reshape(make_results(), [RowBlock("a")])
        assert info.value.spec_index == 1
        assert info.value.term == "b"

    def test_row_without_estimates_raises(self):
        with pytest.raises(ShapeMismatchError, match="no specification estimates"):
            reshape(make_results(), ROWS + [RowBlock("c")])

    def test_duplicate_term_raises(self):
        with pytest.raises(ShapeMismatchError, match="unique"):
            reshape(make_results(), ["a", "b", RowBlock("a", "Again")])

    def test_duplicate_label_raises(self):
        with pytest.raises(ShapeMismatchError, match="unique"):
            reshape(make_results(), [RowBlock("a", "x"), RowBlock("b", "x")])


class TestDisplayTable:
    def test_to_frame(self):
        frame = reshape(make_results(), ROWS).to_frame()
        assert list(frame.columns) == ["", "short", "long"]
        assert frame.iloc[-1, 0] == "N"
        assert len(frame) == 7

    def test_column_lookup(self):
        table = DisplayTable(columns=["x"], rows=[("a", ["1"]), ("N", ["5"])], emphasis=1)
        assert table.column("x") == ["1", "5"]
