from graphql import OperationType

from gqlcodegen.mappers.type_mapper import JAVA_UTIL_LIST, get_generics_string
from gqlcodegen.model.context import MappingContext


def is_not_blank(value: str | None) -> bool:
    return bool(value and value.strip())


def wrap_if_async(context: MappingContext, java_type_name: str, operation_kind: OperationType | None) -> str:
    """
    Wrap the return type of an API method into an asynchronous type when configured.

    - Subscription with `subscriptionReturnType` set:
      `[Event!]!` becomes `org.reactivestreams.Publisher<java.util.List<Event>>`, whatever the
      other async options say.
    - Async API with `apiAsyncReturnListType` set and a list return type: the list is replaced,
      `[Event!]!` becomes `reactor.core.publisher.Flux<Event>`.
    - Async API with `apiAsyncReturnType` set: `Event` becomes `java.util.concurrent.CompletableFuture<Event>`.

    Args:
        context: Global mapping context
        java_type_name: Already mapped Java type
        operation_kind: Root operation kind of the type declaring the field, None for other types

    Returns:
        str: The Java return type
    """
    if operation_kind == OperationType.SUBSCRIPTION and is_not_blank(context.subscription_return_type):
        return get_generics_string(context.subscription_return_type, java_type_name)

    if context.generate_async_api:
        if java_type_name.startswith(JAVA_UTIL_LIST) and is_not_blank(context.api_async_return_list_type):
            return context.api_async_return_list_type + java_type_name[len(JAVA_UTIL_LIST) :]
        if is_not_blank(context.api_async_return_type):
            return get_generics_string(context.api_async_return_type, java_type_name)

    return java_type_name
