from graphql import OperationType

DEFAULT_ROOT_TYPE_NAMES = {
    "Query": OperationType.QUERY,
    "Mutation": OperationType.MUTATION,
    "Subscription": OperationType.SUBSCRIPTION,
}

BUILTIN_SCALAR_TYPES = {
    "ID",
    "String",
    "Int",
    "Float",
    "Boolean",
}


def is_builtin_scalar_type(type_name: str) -> bool:
    return type_name in BUILTIN_SCALAR_TYPES
