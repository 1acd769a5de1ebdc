import numpy as np
import pandas as pd
import pytest

from badcontrol import (
    EquationError, OutOfOrderReferenceError, StructuralEquation, generate, structural_dag,
)


def make_equations():
    """
    a ~ N(0, 1)
    b = 2a + N(0, 1)
    c = a + b > 0
    """
    return [
        StructuralEquation("a", lambda d, rng, n: rng.normal(size=n)),
        StructuralEquation("b", lambda d, rng, n: 2 * d["a"] + rng.normal(size=n), parents=("a",)),
        StructuralEquation("c", lambda d, rng, n: d["a"] + d["b"] > 0, parents=("a", "b")),
    ]


class TestGenerate:
    def test_columns_in_equation_order(self):
        df = generate(1, 100, make_equations())
        assert list(df.columns) == ["a", "b", "c"]
        assert len(df) == 100

    def test_boolean_column_kept(self):
        df = generate(1, 100, make_equations())
        assert df["c"].dtype == bool

    def test_same_seed_is_bit_identical(self):
        first = generate(7, 500, make_equations())
        second = generate(7, 500, make_equations())
        pd.testing.assert_frame_equal(first, second, check_exact=True)

    def test_different_seed_differs(self):
        first = generate(7, 500, make_equations())
        second = generate(8, 500, make_equations())
        assert not np.array_equal(first["a"], second["a"])

    def test_global_random_state_untouched(self):
        np.random.seed(0)
        expected = np.random.random()
        np.random.seed(0)
        generate(7, 500, make_equations())
        assert np.random.random() == expected

    def test_equations_follow_structure(self):
        df = generate(3, 5_000, make_equations())
        slope = np.polyfit(df["a"], df["b"], 1)[0]
        assert abs(slope - 2.0) < 0.1

    def test_scalar_result_is_broadcast(self):
        eqs = [StructuralEquation("one", lambda d, rng, n: 1.0)]
        df = generate(0, 10, eqs)
        assert (df["one"] == 1.0).all()

    def test_wrong_length_raises(self):
        eqs = [StructuralEquation("bad", lambda d, rng, n: rng.normal(size=n + 1))]
        with pytest.raises(EquationError, match="bad") as info:
            generate(0, 10, eqs)
        assert info.value.equation == "bad"

    def test_non_positive_n_raises(self):
        with pytest.raises(EquationError, match="positive"):
            generate(0, 0, make_equations())

    def test_missing_seed_raises(self):
        with pytest.raises(EquationError, match="seed is required"):
            generate(None, 10, make_equations())

    def test_model_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            generate(0, -5, make_equations())

    def test_duplicate_name_raises(self):
        eqs = make_equations() + [StructuralEquation("a", lambda d, rng, n: rng.normal(size=n))]
        with pytest.raises(EquationError, match="more than one"):
            generate(0, 10, eqs)

    def test_equations_cannot_mutate_earlier_columns(self):
        def clobber(d, rng, n):
            d["a"][0] = 99.0
            return d["a"]

        eqs = make_equations()[:1] + [StructuralEquation("b", clobber, parents=("a",))]
        with pytest.raises(ValueError):
            generate(0, 10, eqs)


class TestTopologicalSafety:
    def test_declared_parent_out_of_order_raises(self):
        eqs = list(reversed(make_equations()))
        with pytest.raises(OutOfOrderReferenceError, match="'c' depends on 'a'") as info:
            generate(0, 10, eqs)
        assert info.value.equation == "c"
        assert info.value.variable == "a"

    def test_out_of_order_check_runs_before_any_draw(self):
        calls = []

        def first(d, rng, n):
            calls.append("first")
            return rng.normal(size=n)

        eqs = [
            StructuralEquation("a", first),
            StructuralEquation("b", lambda d, rng, n: d["c"], parents=("c",)),
            StructuralEquation("c", lambda d, rng, n: rng.normal(size=n)),
        ]
        with pytest.raises(OutOfOrderReferenceError):
            generate(0, 10, eqs)
        assert calls == []

    def test_undeclared_read_of_missing_column_raises(self):
        eqs = [
            StructuralEquation("a", lambda d, rng, n: d["b"]),
            StructuralEquation("b", lambda d, rng, n: rng.normal(size=n)),
        ]
        with pytest.raises(OutOfOrderReferenceError, match="has not been generated") as info:
            generate(0, 10, eqs)
        assert info.value.variable == "b"


class TestStructuralDAG:
    def test_edges_from_parents(self):
        dag = structural_dag(make_equations())
        assert dag.nodes == ["a", "b", "c"]
        assert dag.parents("c") == {"a", "b"}
        assert dag.colliders() == {"c"}
