"""算法的通用数据结构和辅助函数。

本模块提供排序算法使用的元素交换函数，以及图遍历算法使用的无向图结构。
"""
from typing import Dict, Generic, Hashable, Iterable, List, MutableSequence, TypeVar

from .errors import MissingNodeError

T = TypeVar("T", bound=Hashable)


def swap(items: MutableSequence, i: int, j: int) -> None:
    """在序列中原地交换两个元素的位置。

    示例:
        >>> arr = [1, 2, 3]
        >>> swap(arr, 0, 2)
        >>> print(arr)  # [3, 2, 1]
    """
    items[i], items[j] = items[j], items[i]


def format_sequence(items: Iterable) -> str:
    """将遍历结果渲染为逗号分隔的文本，例如 ``0, 1, 4``。"""
    return ", ".join(str(item) for item in items)


class Graph(Generic[T]):
    """使用邻接表实现的无向图。

    邻接表按加边顺序记录相邻节点，不做重复边检查：同一条边添加两次会在
    两端各出现两次，自环会在自身的邻接表中出现两次。节点在第一次被
    add_edge 引用时隐式创建，不支持删除节点。

    属性:
        adjacency: 存储图的邻接表，键为节点，值为邻居节点列表
    """

    def __init__(self) -> None:
        """初始化空图。"""
        self.adjacency: Dict[T, List[T]] = {}

    def add_edge(self, src: T, dest: T) -> None:
        """在节点 src 和 dest 之间添加一条无向边。

        由于是无向图，会在两个节点的邻接表中都添加对方。

        时间复杂度: O(1) - 平均情况下的常数时间

        示例:
            >>> graph = Graph()
            >>> graph.add_edge('A', 'B')
            >>> print(graph.neighbors('A'))  # ['B']
        """
        self.adjacency.setdefault(src, []).append(dest)
        self.adjacency.setdefault(dest, []).append(src)

    def neighbors(self, node: T) -> List[T]:
        """返回指定节点的邻居节点列表。

        异常:
            MissingNodeError: 节点不在图中
        """
        try:
            return self.adjacency[node]
        except KeyError:
            raise MissingNodeError(node) from None

    @property
    def nodes(self) -> List[T]:
        return list(self.adjacency)

    def describe(self) -> str:
        """每个节点输出一行 ``<node> -> [<adj1>, <adj2>, ...]``。"""
        return "".join(
            f"{node} -> [{format_sequence(adjacent)}]\n"
            for node, adjacent in self.adjacency.items()
        )

    def __contains__(self, node: object) -> bool:
        return node in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)

    def __str__(self) -> str:
        return self.describe()
