"""Breadth-first search algorithm."""
import math
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from ...errors import MissingNodeError
from ...template import ProductionAlgorithm
from ...utils import Graph


class BreadthFirstSearch(ProductionAlgorithm):
    """广度优先搜索算法实现，支持可选的最大深度限制。

    算法按层次顺序访问图中的节点：先访问起始节点，再访问距离为 1 的
    邻居节点，然后是距离为 2 的节点，以此类推。

    深度限制只决定出队节点是否被输出和展开，并不阻止邻居入队：
    位于 max_depth 层的节点仍会把 max_depth + 1 层的邻居加入队列，
    这些邻居出队时因深度超限被跳过。
    """

    def execute(self, graph: Graph, start: Any, max_depth: Optional[int] = None) -> List[Any]:
        """从指定起始节点开始执行广度优先搜索。

        参数:
            graph: 要遍历的图对象
            start: 搜索的起始节点，必须存在于图中
            max_depth: 最大深度，None 表示不限制；小于 0 时返回空列表

        返回:
            List[Any]: 按出队顺序排列、深度不超过 max_depth 的节点列表

        异常:
            MissingNodeError: 起始节点不在图中

        时间复杂度: O(V + E)
        空间复杂度: O(V)

        示例:
            >>> graph = Graph()
            >>> graph.add_edge('A', 'B')
            >>> graph.add_edge('B', 'C')
            >>> BreadthFirstSearch().execute(graph, 'A', 1)
            ['A', 'B']
        """
        return super().execute(graph, start, max_depth)

    def _validate_inputs(self, graph: Graph, start: Any, max_depth: Optional[int] = None) -> None:
        if start not in graph:
            raise MissingNodeError(start)

    def _execute_core(self, graph: Graph, start: Any, max_depth: Optional[int] = None) -> List[Any]:
        limit = math.inf if max_depth is None else max_depth

        visited: Dict[Any, bool] = {node: False for node in graph.nodes}
        depth: Dict[Any, float] = {node: math.inf for node in graph.nodes}

        queue: Deque[Any] = deque([start])
        visited[start] = True
        depth[start] = 0

        result: List[Any] = []
        while queue:
            node = queue.popleft()
            # 深度超限的节点既不输出也不展开
            if depth[node] > limit:
                continue

            for neighbor in graph.neighbors(node):
                if not visited[neighbor]:
                    visited[neighbor] = True
                    depth[neighbor] = depth[node] + 1
                    queue.append(neighbor)

            result.append(node)

        return result


def bfs(graph: Graph, start: Any, max_depth: Optional[int] = None) -> List[Any]:
    """便捷函数：执行广度优先搜索"""
    return BreadthFirstSearch().execute(graph, start, max_depth)
