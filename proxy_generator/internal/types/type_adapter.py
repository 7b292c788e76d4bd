"""
Преобразование .NET типов из описания API в типы TypeScript
"""

import re
from typing import Callable, List, Optional

from ..constants import SYSTEM_TYPES
from ..utils.text import camel
from .generics import parse_generics

_SYSTEM_TYPE = re.compile(r"System\.([0-9A-Za-z.]+)")
_GENERICS = re.compile(r"<.+>")


def flatten_dictionary_types(types: List[str], type_name: str) -> List[str]:
    """
    Разворачивает словарную нотацию {K:V} в список типов.

    Examples:
        >>> flatten_dictionary_types([], "{string:number}")
        ['string', 'number']
    """
    types.extend(re.sub(r"[{}]", "", type_name).split(":"))
    return types


def _convert_array_notation(type_name: str) -> str:
    """[T] -> T[] с учетом вложенности ([[T]] -> T[][])"""
    start = type_name.find("[")
    while start != -1:
        if type_name[start + 1 : start + 2] == "]":
            start = type_name.find("[", start + 2)
            continue

        depth = 0
        for end in range(start, len(type_name)):
            if type_name[end] == "[":
                depth += 1
            elif type_name[end] == "]":
                depth -= 1
                if depth == 0:
                    break
        else:
            return type_name

        inner = _convert_array_notation(type_name[start + 1 : end])
        type_name = type_name[:start] + inner + "[]" + type_name[end + 1 :]
        start = type_name.find("[", start + len(inner) + 2)

    return type_name


def normalize_type_annotations(type_name: str) -> str:
    """
    Приводит аннотации к виду TypeScript: [T] -> T[], маркер nullable удаляется.

    Examples:
        >>> normalize_type_annotations("[string]?")
        'string[]'
    """
    return _convert_array_notation(type_name).replace("?", "")


def remove_generics(type_name: str) -> str:
    """List<User> -> List"""
    return _GENERICS.sub("", type_name)


def remove_type_modifiers(type_name: str) -> str:
    """string[] -> string"""
    return type_name.replace("[]", "")


def parse_type(
    type_name: str, replacer: Optional[Callable[[str], str]] = None
) -> List[str]:
    """Развернуть словарь, нормализовать аннотации и применить replacer к каждому типу"""
    result = []
    for part in flatten_dictionary_types([], type_name):
        part = normalize_type_annotations(part)
        result.append(replacer(part) if replacer else part)

    return result


def _simplify_part(type_name: str) -> str:
    type_name = _SYSTEM_TYPE.sub(
        lambda m: SYSTEM_TYPES.get(m.group(1), camel(m.group(1))), type_name
    )
    return type_name.split(".")[-1]


def simplify_type(type_name: str) -> str:
    """
    Системные типы заменяются примитивами TypeScript, у остальных
    остается только последний сегмент пространства имен.

    Examples:
        >>> simplify_type("System.Int32")
        'number'
        >>> simplify_type("MyApp.Users.UserDto")
        'UserDto'
        >>> simplify_type("{string:System.Int64}")
        'Record<string, number>'
    """
    parsed = parse_type(type_name, _simplify_part)
    record = parsed.pop()
    for key in reversed(parsed):
        record = f"Record<{key}, {record}>"

    return record


def adapt_type(type_name: str) -> str:
    """
    Адаптация с учетом generic-аргументов: каждый узел дерева упрощается отдельно.

    Examples:
        >>> adapt_type("Volo.Abp.Application.Dtos.PagedResultDto<MyApp.Users.UserDto>")
        'PagedResultDto<UserDto>'
    """
    return parse_generics(type_name).to_string(simplify_type)
