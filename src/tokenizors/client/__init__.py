from tokenizors.client.gateway import (
    ApiClient,
    GatewayError,
    NoResponseError,
    ServerError,
    UnexpectedClientError,
)

__all__ = [
    "ApiClient",
    "GatewayError",
    "NoResponseError",
    "ServerError",
    "UnexpectedClientError",
]
