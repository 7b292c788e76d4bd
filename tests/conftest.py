"""
Общие данные для тестов: описание API небольшого модуля пользователей
"""

import copy

import pytest

SOLUTION = "Acme.Shop"


def _param_on_method(name, type_name, type_simple, **kwargs):
    return {
        "name": name,
        "typeAsString": type_name,
        "type": type_name,
        "typeSimple": type_simple,
        "isOptional": kwargs.get("is_optional", False),
        "defaultValue": kwargs.get("default_value"),
    }


def _param(name_on_method, name, source, type_name, type_simple, descriptor=""):
    return {
        "nameOnMethod": name_on_method,
        "name": name,
        "bindingSourceId": source,
        "type": type_name,
        "typeSimple": type_simple,
        "isOptional": False,
        "defaultValue": None,
        "constraintTypes": None,
        "descriptorName": descriptor,
    }


def _prop(name, type_name, type_simple):
    return {
        "name": name,
        "jsonName": None,
        "type": type_name,
        "typeSimple": type_simple,
        "isRequired": False,
    }


API_DEFINITION = {
    "modules": {
        "app": {
            "rootPath": "app",
            "remoteServiceName": "Default",
            "controllers": {
                "Acme.Shop.Users.UserController": {
                    "controllerName": "User",
                    "type": "Acme.Shop.Users.UserController",
                    "actions": {
                        "GetAsyncById": {
                            "uniqueName": "GetAsyncById",
                            "name": "GetAsync",
                            "httpMethod": "GET",
                            "url": "api/app/user/{id}",
                            "parametersOnMethod": [
                                _param_on_method("id", "System.Guid", "string")
                            ],
                            "parameters": [
                                _param("id", "id", "Path", "System.Guid", "string")
                            ],
                            "returnValue": {
                                "type": "Acme.Shop.Users.UserDto",
                                "typeSimple": "Acme.Shop.Users.UserDto",
                            },
                        },
                        "CreateAsyncByInput": {
                            "uniqueName": "CreateAsyncByInput",
                            "name": "CreateAsync",
                            "httpMethod": "POST",
                            "url": "api/app/user",
                            "parametersOnMethod": [
                                _param_on_method(
                                    "input",
                                    "Acme.Shop.Users.CreateUserDto",
                                    "Acme.Shop.Users.CreateUserDto",
                                )
                            ],
                            "parameters": [
                                _param(
                                    "input",
                                    "input",
                                    "Body",
                                    "Acme.Shop.Users.CreateUserDto",
                                    "Acme.Shop.Users.CreateUserDto",
                                )
                            ],
                            "returnValue": {
                                "type": "Acme.Shop.Users.UserDto",
                                "typeSimple": "Acme.Shop.Users.UserDto",
                            },
                        },
                        "GetListAsyncByInput": {
                            "uniqueName": "GetListAsyncByInput",
                            "name": "GetListAsync",
                            "httpMethod": "GET",
                            "url": "api/app/user",
                            "parametersOnMethod": [
                                _param_on_method(
                                    "input",
                                    "Acme.Shop.Users.GetUsersInput",
                                    "Acme.Shop.Users.GetUsersInput",
                                )
                            ],
                            "parameters": [
                                _param(
                                    "input",
                                    "Filter",
                                    "ModelBinding",
                                    "System.String",
                                    "string",
                                    descriptor="input",
                                ),
                                _param(
                                    "input",
                                    "MaxResultCount",
                                    "ModelBinding",
                                    "System.Int32",
                                    "number",
                                    descriptor="input",
                                ),
                            ],
                            "returnValue": {
                                "type": "Volo.Abp.Application.Dtos.PagedResultDto<Acme.Shop.Users.UserDto>",
                                "typeSimple": "Volo.Abp.Application.Dtos.PagedResultDto<Acme.Shop.Users.UserDto>",
                            },
                        },
                    },
                }
            },
        }
    },
    "types": {
        "Acme.Shop.Shared.EntityBase": {
            "baseType": None,
            "isEnum": False,
            "properties": [_prop("Id", "System.Guid", "string")],
        },
        "Acme.Shop.Users.UserDto": {
            "baseType": "Acme.Shop.Shared.EntityBase",
            "isEnum": False,
            "properties": [
                _prop("Name", "System.String", "string"),
                _prop("Note", "System.String", "string?"),
                _prop("Status", "Acme.Shop.Users.UserStatus", "Acme.Shop.Users.UserStatus"),
                _prop("Tags", "[System.String]", "[string]"),
            ],
        },
        "Acme.Shop.Users.CreateUserDto": {
            "baseType": None,
            "isEnum": False,
            "properties": [_prop("Name", "System.String", "string")],
        },
        "Acme.Shop.Users.GetUsersInput": {
            "baseType": None,
            "isEnum": False,
            "properties": [
                _prop("Filter", "System.String", "string?"),
                _prop("MaxResultCount", "System.Int32", "number"),
            ],
        },
        "Acme.Shop.Users.UserStatus": {
            "baseType": "System.Enum",
            "isEnum": True,
            "enumNames": ["Active", "Blocked"],
            "enumValues": [0, 1],
        },
        "Volo.Abp.Application.Dtos.PagedResultDto<T0>": {
            "baseType": None,
            "isEnum": False,
            "genericArguments": ["T"],
            "properties": [
                _prop("TotalCount", "System.Int64", "number"),
                _prop("Items", "[T]", "[T]"),
            ],
        },
    },
}


@pytest.fixture
def api_definition():
    """Копия описания API, которую тест может менять"""
    return copy.deepcopy(API_DEFINITION)


@pytest.fixture
def solution():
    return SOLUTION
