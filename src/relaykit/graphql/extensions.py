"""
Schema extension binding request context for the duration of an operation
"""

from collections.abc import Iterator

from strawberry.extensions import SchemaExtension

from ..logging import generate_request_id, operation_name_ctx, request_id_ctx


class RequestContextExtension(SchemaExtension):
    """Bind the operation name (and a request id, if none is bound) to log records.

    Values bound here are reset once execution finishes; a request id set
    earlier by the router's context getter is left alone.
    """

    def on_execute(self) -> Iterator[None]:
        request_token = None
        if request_id_ctx.get() is None:
            request_token = request_id_ctx.set(generate_request_id())
        operation_token = operation_name_ctx.set(self.execution_context.operation_name)
        try:
            yield
        finally:
            operation_name_ctx.reset(operation_token)
            if request_token is not None:
                request_id_ctx.reset(request_token)
