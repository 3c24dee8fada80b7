from netroute.core.graph import Graph
from netroute.core.traversal import BreadthFirstSearch, DepthFirstSearch


def make_tree():
    g = Graph(directed=False)
    g.add_edge(1, 2, 0)
    g.add_edge(1, 3, 0)
    g.add_edge(2, 4, 0)
    return g


class TestBreadthFirstSearch:
    def test_simple_traversal(self):
        assert BreadthFirstSearch().run(make_tree(), 1) == [1, 2, 3, 4]

    def test_shared_neighbour_is_visited_once(self):
        g = Graph()
        g.add_edge("a", "b", 0)
        g.add_edge("a", "c", 0)
        g.add_edge("b", "d", 0)
        g.add_edge("c", "d", 0)
        assert BreadthFirstSearch().run(g, "a") == ["a", "b", "c", "d"]

    def test_absent_start_is_still_visited(self):
        assert BreadthFirstSearch().run(make_tree(), 99) == [99]

    def test_instance_is_reusable(self):
        bfs = BreadthFirstSearch()
        g = make_tree()
        assert bfs.run(g, 1) == [1, 2, 3, 4]
        assert bfs.run(g, 4) == [4, 2, 1, 3]
        assert bfs.visited == {1, 2, 3, 4}
        assert bfs.order == [4, 2, 1, 3]


class TestDepthFirstSearch:
    def test_neighbours_come_off_the_stack_reversed(self):
        assert DepthFirstSearch().run(make_tree(), 1) == [1, 3, 2, 4]

    def test_directed_chain(self):
        g = Graph()
        g.add_edge("a", "b", 0)
        g.add_edge("b", "c", 0)
        g.add_edge("a", "c", 0)
        # c is pushed twice, visited once.
        assert DepthFirstSearch().run(g, "a") == ["a", "c", "b"]

    def test_unreachable_nodes_are_not_visited(self):
        g = make_tree()
        g.add_node(5)
        assert 5 not in DepthFirstSearch().run(g, 1)
        assert DepthFirstSearch().run(g, 5) == [5]

    def test_absent_start_is_still_visited(self):
        assert DepthFirstSearch().run(Graph(), "x") == ["x"]

    def test_visited_set_is_reset_between_runs(self):
        dfs = DepthFirstSearch()
        g = Graph()
        g.add_edge("a", "b", 0)
        g.add_node("c")
        dfs.run(g, "a")
        assert dfs.run(g, "c") == ["c"]
        assert dfs.visited == {"c"}
