import re

# Пакет с RestService и базовыми DTO фреймворка
CORE_PACKAGE = "@abpjs/core"
REST_SERVICE = "RestService"
REST_SERVICE_HOOK = "useRestService"
REACT_QUERY_PACKAGE = "@tanstack/react-query"
REACT_QUERY_HOOKS = ["useMutation", "useQuery", "useQueryClient"]

PROXY_PATH = "proxy"
PROXY_CONFIG_FILE = "generate-proxy.json"
PROXY_WARNING_FILE = "README.md"
API_DEFINITION_ENDPOINT = "/api/abp/api-definition?includeTypes=true"

# DTO фреймворка не генерируются, а импортируются из CORE_PACKAGE
FRAMEWORK_TYPE_REGEX = re.compile(r"^Volo\.Abp\.(Application\.Dtos|ObjectExtending)")
NAME_VALUE_REF = "Volo.Abp.NameValue"

SYSTEM_TYPES = {
    "Bool": "boolean",
    "Boolean": "boolean",
    "Byte": "number",
    "Char": "string",
    "DateTime": "string",
    "DateTimeOffset": "string",
    "Decimal": "number",
    "Double": "number",
    "Guid": "string",
    "Int16": "number",
    "Int32": "number",
    "Int64": "number",
    "Object": "any",
    "SByte": "number",
    "Single": "number",
    "String": "string",
    "TimeSpan": "string",
    "UInt16": "number",
    "UInt32": "number",
    "UInt64": "number",
    "Uri": "string",
    "Void": "void",
}
