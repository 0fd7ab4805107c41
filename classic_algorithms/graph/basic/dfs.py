"""Depth-first search algorithm."""
from typing import Any, Dict, List

from ...errors import MissingNodeError
from ...template import ProductionAlgorithm
from ...utils import Graph


class DepthFirstSearch(ProductionAlgorithm):
    """基于栈（LIFO）的深度优先搜索算法实现。

    每次弹出栈顶节点后，会先把它所有未访问的邻居一次性压栈，再继续弹出。
    因此同一节点的多个邻居按邻接表的逆序被访问，这与递归实现的访问顺序
    不同，是该遍历可观察的行为之一。
    """

    def execute(self, graph: Graph, start: Any) -> List[Any]:
        """从指定起始节点开始执行深度优先搜索。

        参数:
            graph: 要遍历的图对象
            start: 搜索的起始节点，必须存在于图中

        返回:
            List[Any]: 按出栈顺序访问的节点列表，每个可达节点恰好出现一次

        异常:
            MissingNodeError: 起始节点不在图中

        时间复杂度: O(V + E)
        空间复杂度: O(V)
        """
        return super().execute(graph, start)

    def _validate_inputs(self, graph: Graph, start: Any) -> None:
        if start not in graph:
            raise MissingNodeError(start)

    def _execute_core(self, graph: Graph, start: Any) -> List[Any]:
        visited: Dict[Any, bool] = {node: False for node in graph.nodes}

        stack: List[Any] = [start]
        visited[start] = True

        result: List[Any] = []
        while stack:
            node = stack.pop()

            for neighbor in graph.neighbors(node):
                if not visited[neighbor]:
                    visited[neighbor] = True
                    stack.append(neighbor)

            result.append(node)

        return result


def dfs(graph: Graph, start: Any) -> List[Any]:
    """便捷函数：执行深度优先搜索"""
    return DepthFirstSearch().execute(graph, start)
