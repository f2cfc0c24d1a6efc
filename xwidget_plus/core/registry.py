"""
脚本注册表

保存 命名空间 -> 函数名 -> JS 源码 的两级映射。

同一 (命名空间, 函数名) 最多只有一份源码，重复注册直接覆盖。
命名空间内的顺序为函数第一次注册的顺序，覆盖不改变位置。
"""

from typing import Dict, Iterator, List, Optional, Tuple

from xwidget_plus.utils.logger import get_logger

logger = get_logger(__name__)


class ScriptRegistry:
    """
    JS 函数注册表

    由调用方显式创建并传给 define_function / inject_namespace。
    不加锁，只应在单一控制线程中修改。
    """

    def __init__(self):
        self._namespaces: Dict[str, Dict[str, str]] = {}

    def register_function(self, namespace: str, name: str, source: str) -> None:
        """注册（或覆盖）一个函数的源码"""
        functions = self._namespaces.setdefault(namespace, {})
        if name in functions:
            logger.debug(f"覆盖已注册函数 {namespace}.{name}")
        functions[name] = source

    def unregister_function(self, namespace: str, name: str) -> bool:
        """
        移除一个函数

        Returns:
            是否确实移除了函数
        """
        functions = self._namespaces.get(namespace)
        if not functions or name not in functions:
            return False
        del functions[name]
        if not functions:
            del self._namespaces[namespace]
        return True

    def get_function_source(self, namespace: str, name: str) -> Optional[str]:
        return self._namespaces.get(namespace, {}).get(name)

    def get_namespace_source(self, namespace: str) -> str:
        """
        拼接命名空间下的全部源码

        每个函数一行，按注册顺序；未知命名空间返回空字符串。
        """
        return "\n".join(self._namespaces.get(namespace, {}).values())

    def namespaces(self) -> List[str]:
        return list(self._namespaces)

    def functions(self, namespace: str) -> List[str]:
        return list(self._namespaces.get(namespace, {}))

    def clear(self) -> None:
        self._namespaces.clear()

    def __contains__(self, key: Tuple[str, str]) -> bool:
        namespace, name = key
        return name in self._namespaces.get(namespace, {})

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for namespace, functions in self._namespaces.items():
            for name in functions:
                yield namespace, name

    def __len__(self) -> int:
        return sum(len(functions) for functions in self._namespaces.values())

    def __repr__(self) -> str:
        return f"ScriptRegistry(namespaces={self.namespaces()!r}, functions={len(self)})"


# 进程级默认注册表，任何操作都不会隐式使用它
default_registry = ScriptRegistry()
