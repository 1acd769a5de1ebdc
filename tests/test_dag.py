import pytest

from badcontrol import DAG, GraphError


class TestDAG:
    def test_basic_edges(self):
        dag = DAG()
        dag.assume("A").causes("B")
        dag.assume("B").causes("C")
        assert dag.parents("B") == {"A"}
        assert dag.children("B") == {"C"}

    def test_multiple_effects_in_one_call(self):
        dag = DAG()
        dag.assume("A").causes("B", "C")
        assert dag.children("A") == {"B", "C"}

    def test_cycle_detection(self):
        dag = DAG()
        dag.assume("A").causes("B")
        dag.assume("B").causes("C")
        with pytest.raises(GraphError, match="cycle"):
            dag.assume("C").causes("A")

    def test_self_loop_raises(self):
        with pytest.raises(GraphError, match="Self-loops"):
            DAG().assume("A").causes("A")

    def test_duplicate_edge_raises(self):
        dag = DAG()
        dag.assume("A").causes("B")
        with pytest.raises(GraphError, match="already asserted"):
            dag.assume("A").causes("B")

    def test_isolated_node_is_kept(self):
        dag = DAG()
        dag.assume("z")
        dag.assume("k").causes("d")
        assert dag.nodes == ["z", "k", "d"]


class TestEdgeStyles:
    def test_default_style_is_observed(self):
        dag = DAG()
        dag.assume("A").causes("B")
        assert dag.style("A", "B") == "observed"

    def test_style_applies_to_every_effect(self):
        dag = DAG()
        dag.assume("ability").causes("occupation", "wage", style="unobserved")
        assert dag.style("ability", "occupation") == "unobserved"
        assert dag.style("ability", "wage") == "unobserved"

    def test_unknown_edge_raises(self):
        dag = DAG()
        dag.assume("A").causes("B")
        with pytest.raises(GraphError, match="not an edge"):
            dag.style("B", "A")

    def test_repr_marks_non_default_styles(self):
        dag = DAG()
        dag.assume("A").causes("B", style="unobserved")
        assert "[unobserved]" in repr(dag)


class TestColliders:
    def test_colliders(self):
        dag = DAG()
        dag.assume("d").causes("y", "x")
        dag.assume("y").causes("x")
        assert dag.colliders() == {"x"}

    def test_single_cause_is_not_a_collider(self):
        dag = DAG()
        dag.assume("k").causes("d")
        dag.assume("d").causes("y")
        assert dag.colliders() == set()
