"""Пространства имен и относительные пути между сгенерированными файлами"""

from ..utils.text import kebab
from .type_adapter import remove_generics

CONTROLLERS_SEGMENT = "Controllers"


def parse_namespace(solution: str, type_name: str) -> str:
    """
    Логическое пространство имен типа без корня решения и сегмента Controllers.

    Корень решения отбрасывается справа налево: сначала последний сегмент,
    затем два последних и т.д.

    Examples:
        >>> parse_namespace("MyCompany.MyProduct", "MyCompany.MyProduct.Users.UserDto")
        'Users'
        >>> parse_namespace("MyCompany.MyProduct", "MyCompany.MyProduct.Users.Controllers.UserController")
        'Users'
    """
    parts = remove_generics(type_name).split(".")[:-1]
    solution_parts = [part for part in solution.split(".") if part]

    for size in range(1, len(solution_parts) + 1):
        prefix = solution_parts[-size:]
        if parts[:size] == prefix:
            parts = parts[size:]

    if parts and parts[-1] == CONTROLLERS_SEGMENT:
        parts = parts[:-1]

    return ".".join(parts)


def calculate_relative_path(namespace: str, target_namespace: str) -> str:
    """
    Относительный путь от директории namespace до директории target_namespace.

    Examples:
        >>> calculate_relative_path("Users", "Shared.Dtos")
        '../shared/dtos'
        >>> calculate_relative_path("Users", "Users")
        '.'
    """
    source = [part for part in namespace.split(".") if part]
    target = [part for part in target_namespace.split(".") if part]

    while source and target and source[0] == target[0]:
        source.pop(0)
        target.pop(0)

    up = [".."] * len(source) or ["."]
    return "/".join(up + [kebab(part) for part in target])


def relative_path_to_model(namespace: str, model_namespace: str) -> str:
    return calculate_relative_path(namespace, model_namespace) + "/models"


def relative_path_to_enum(namespace: str, enum_namespace: str, enum_name: str) -> str:
    return (
        calculate_relative_path(namespace, enum_namespace)
        + "/"
        + kebab(enum_name)
        + ".enum"
    )
