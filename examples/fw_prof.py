# pylint: disable=protected-access,invalid-name
from line_profiler import LineProfiler

from fwgraph import FloydWarshallAllShortestPaths, StrictMultiDiGraph

g = StrictMultiDiGraph()
for node_num in range(60):
    node_id = str(node_num)
    g.add_node(node_id)
    for _node_id in list(g):
        if _node_id != node_id:
            for _cost in range(5, 0, -1):
                g.add_edge(_node_id, node_id, cost=_cost)
                g.add_edge(node_id, _node_id, cost=_cost + 1)

fw = FloydWarshallAllShortestPaths(g)

lp = LineProfiler()
lp.add_function(FloydWarshallAllShortestPaths._internal_compute)
lp.add_function(FloydWarshallAllShortestPaths.try_get_path)
lp.runcall(fw.compute)
lp.runcall(fw.try_get_path, "0", "59")
lp.print_stats()
