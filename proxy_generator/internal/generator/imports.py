"""Сборка и слияние импортов сгенерированных файлов"""

import re
from typing import Iterable, List, Optional, Tuple

from ..constants import CORE_PACKAGE, FRAMEWORK_TYPE_REGEX
from ..types.models import Import, ImportKeyword
from ..types.namespace import (
    parse_namespace,
    relative_path_to_enum,
    relative_path_to_model,
)
from ..types.type_adapter import adapt_type, remove_type_modifiers, simplify_type

TypeRef = Tuple[str, bool]  # (полное имя типа, is_enum)


def merge_import(imports: List[Import], new_import: Import) -> List[Import]:
    """Добавление импорта: при совпадении (path, keyword) - слияние с существующим"""
    for existing in imports:
        if existing.key == new_import.key:
            existing.merge(new_import)
            return imports

    imports.append(new_import)
    return imports


def sort_imports(imports: List[Import]) -> None:
    imports.sort(key=lambda _: (re.sub(r"\.{1,2}/", "", _.path), _.keyword.value))


class TypeImportMapper:
    """Импорт типа из файла, сгенерированного для его пространства имен"""

    def __init__(self, solution: str, namespace: str):
        self.solution = solution
        self.namespace = namespace

    def map_type(self, type_name: str, is_enum: bool) -> Optional[Import]:
        if not type_name or type_name.startswith("System"):
            return None

        ref = remove_type_modifiers(type_name)
        specifier = adapt_type(simplify_type(ref).split("<")[0])
        type_namespace = parse_namespace(self.solution, ref)

        if FRAMEWORK_TYPE_REGEX.match(type_name):
            path = CORE_PACKAGE
        elif is_enum:
            path = relative_path_to_enum(self.namespace, type_namespace, specifier)
        else:
            path = relative_path_to_model(self.namespace, type_namespace)

        return Import(
            path=path, keyword=ImportKeyword.TYPE, refs={ref}, specifiers=[specifier]
        )

    def reduce_types(
        self, imports: List[Import], types: Iterable[TypeRef]
    ) -> List[Import]:
        for type_name, is_enum in types:
            new_import = self.map_type(type_name, is_enum)
            if new_import:
                merge_import(imports, new_import)

        return imports
