from abc import ABC, abstractmethod
from typing import Any


class Algorithm(ABC):
    """所有算法的基类。

    定义了算法的通用接口，排序和图遍历算法都继承这个类并实现 execute 方法。
    """

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """执行算法并返回结果。

        参数:
            *args: 位置参数，具体参数取决于算法实现
            **kwargs: 关键字参数，具体参数取决于算法实现

        返回:
            Any: 算法执行的结果，类型取决于具体算法
        """
        raise NotImplementedError
