from enum import Enum

from .utils.text import interpolate


class ErrorMessage(str, Enum):
    INVALID_API_DEFINITION = (
        "[Invalid API Definition] The provided API definition is invalid: "
        "'types' and 'modules' are required."
    )
    INVALID_MODULE = (
        '[Invalid Module] Backend module "{0}" does not exist in API definition.'
    )
    NO_TYPE_DEFINITION = '[No Type Definition] Type definition for "{0}" is not found.'
    NO_ENUM_MEMBERS = (
        '[Invalid Enum] Type definition for "{0}" has no enum names or values.'
    )
    MULTIPLE_BODY_PARAMETERS = (
        '[Invalid Action] Action "{0}" declares more than one body parameter: "{1}".'
    )
    NO_PROXY_CONFIG = (
        '[Proxy Config Not Found] There is no "{0}" file. '
        "Generate the proxy for a module first."
    )
    INVALID_PROXY_CONFIG = '[Invalid Proxy Config] Unable to read "{0}": {1}'


class ProxyGeneratorError(Exception):
    """Базовая ошибка генерации прокси"""

    message: ErrorMessage = None

    def __init__(self, *params):
        self.params = params
        super().__init__(interpolate(self.message.value, *params))


class InvalidApiDefinitionError(ProxyGeneratorError):
    message = ErrorMessage.INVALID_API_DEFINITION


class InvalidModuleError(ProxyGeneratorError):
    message = ErrorMessage.INVALID_MODULE


class TypeDefinitionError(ProxyGeneratorError):
    message = ErrorMessage.NO_TYPE_DEFINITION


class EnumDefinitionError(TypeDefinitionError):
    message = ErrorMessage.NO_ENUM_MEMBERS


class ActionDefinitionError(ProxyGeneratorError):
    message = ErrorMessage.MULTIPLE_BODY_PARAMETERS


class ProxyConfigNotFoundError(ProxyGeneratorError):
    message = ErrorMessage.NO_PROXY_CONFIG


class ProxyConfigError(ProxyGeneratorError):
    message = ErrorMessage.INVALID_PROXY_CONFIG
