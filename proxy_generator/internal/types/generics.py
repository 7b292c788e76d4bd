"""
Разбор generic-нотации типов (List<Dto>, Dictionary<K, List<V>>) в дерево
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

TypeMapper = Callable[[str], str]


@dataclass
class TypeNode:
    """Узел дерева: имя типа и индексы связанных узлов в арене"""

    data: str
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)
    index: int = 0
    suffix: str = ""


class TypeTree:
    """Дерево generic-типа, узлы хранятся в общем списке и ссылаются друг на друга индексами"""

    ROOT = 0

    def __init__(self):
        self.nodes: List[TypeNode] = []

    def add_node(self, data: str, parent: Optional[int] = None) -> int:
        node = TypeNode(data=data.strip(), parent=parent)
        node_id = len(self.nodes)
        self.nodes.append(node)

        if parent is not None:
            siblings = self.nodes[parent].children
            node.index = len(siblings)
            siblings.append(node_id)

        return node_id

    @property
    def root(self) -> TypeNode:
        return self.nodes[self.ROOT]

    def to_generics(self, node_id: int = ROOT) -> List[str]:
        """
        Тип с плейсхолдерами T0, T1, ... и все вложенные типы.

        Examples:
            >>> parse_generics("List<User>").to_generics()
            ['List<T0>', 'User']
        """
        node = self.nodes[node_id]
        generics = ""
        if node.children:
            generics = "<" + ",".join(f"T{i}" for i in range(len(node.children))) + ">"

        result = [node.data + generics]
        for child_id in node.children:
            result.extend(self.to_generics(child_id))

        return result

    def to_string(self, mapper: Optional[TypeMapper] = None, node_id: int = ROOT) -> str:
        """Сборка обратно в строку с применением mapper к каждому узлу"""
        node = self.nodes[node_id]
        representation = mapper(node.data) if mapper else node.data
        if not representation:
            return ""

        arguments = [
            text
            for text in (self.to_string(mapper, child_id) for child_id in node.children)
            if text
        ]
        if arguments:
            representation += "<" + ", ".join(arguments) + ">"

        return representation + node.suffix

    def __str__(self):
        return self.to_string()


def parse_generics(type_name: str) -> TypeTree:
    """
    Разбор строки типа в дерево.

    '<' открывает группу аргументов у текущего узла, ',' создает соседний
    аргумент, '>' закрывает группу и возвращает курсор к владельцу группы.
    Словарная нотация {K:V} должна быть развернута заранее.
    """
    tree = TypeTree()
    root_data, _, rest = type_name.partition("<")
    cursor = tree.add_node(root_data)

    if not rest:
        return tree

    cursor = tree.add_node("", parent=cursor)
    buffer = ""

    for char in rest:
        if char not in "<,>":
            buffer += char
            continue

        node = tree.nodes[cursor]
        if buffer.strip():
            # Текст после '>' без запятой (например "[]") относится к закрытому типу
            if node.data:
                node.suffix += buffer.strip()
            else:
                node.data = buffer.strip()
        buffer = ""

        if char == "<":
            cursor = tree.add_node("", parent=cursor)
        elif char == ",":
            cursor = tree.add_node("", parent=node.parent)
        elif node.parent is not None:
            cursor = node.parent

    if buffer.strip():
        tree.nodes[cursor].suffix += buffer.strip()

    return tree
