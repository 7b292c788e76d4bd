"""Утилиты для преобразования регистра имен"""

import re

_SEPARATORS = re.compile(r"[-_.\s]+(.)?")
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def camel(text: str) -> str:
    """
    Приводит имя к camelCase.

    Examples:
        >>> camel("UserName")
        'userName'
        >>> camel("max_result-count")
        'maxResultCount'
    """
    text = _SEPARATORS.sub(lambda m: m.group(1).upper() if m.group(1) else "", text)
    return text[:1].lower() + text[1:]


def pascal(text: str) -> str:
    """Приводит имя к PascalCase"""
    text = camel(text)
    return text[:1].upper() + text[1:]


def kebab(text: str) -> str:
    """
    Приводит имя к kebab-case.

    Examples:
        >>> kebab("IdentityUser")
        'identity-user'
    """
    text = _CAMEL_BOUNDARY.sub(r"\1_\2", text).lower()
    return re.sub(r"[ _]", "-", text)


def dir_path(namespace: str) -> str:
    """Преобразует пространство имен в путь директории (Identity.Users -> identity/users)"""
    return "/".join(kebab(part) for part in namespace.split(".") if part)


def interpolate(text: str, *params) -> str:
    """Подставляет параметры в плейсхолдеры {0}, {1}, ..."""
    for index, param in enumerate(params):
        text = text.replace("{" + str(index) + "}", str(param))
    return text
