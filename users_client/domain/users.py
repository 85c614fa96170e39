"""
Users domain service - Create-user call orchestration.

This module contains the single logical operation of the client:
creating a user on the remote API. It builds the request descriptor,
drives the call state machine, and classifies every way a call can end.

Outcome Classification
======================

    Transport failure or timeout  -> TransportError
    Non-2xx status                -> ServerError(status_code)
    2xx with an undecodable body  -> DecodeError
    2xx with a valid body         -> CreatedUser
    Missing configuration         -> ConfigurationError (raised, fatal)

Every classified outcome is returned as a CallOutcome; a ClientError
never propagates out of execute(). Nothing is retried or cached.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from .calls import CallOutcome, UserCall
from .config import ClientConfig
from .exceptions import ClientError, ConfigurationError, ServerError, TransportError
from .models import CreatedUser, CreateUserRequest
from .ports import HttpRequest, HttpResponse, HttpTransport, UserCodec

logger = logging.getLogger(__name__)

USERS_PATH = "/users"


def build_create_user_request(request: CreateUserRequest, codec: UserCodec) -> HttpRequest:
    """
    Build the POST /users request descriptor for a request model.

    Args:
        request: User data to send
        codec: Codec providing the body encoding and content type

    Returns:
        HttpRequest relative to the configured base URL
    """
    return HttpRequest(
        method="POST",
        path=USERS_PATH,
        body=codec.encode(request),
        headers={"Content-Type": codec.content_type, "Accept": codec.content_type},
    )


@dataclass
class UsersClient:
    """
    Asynchronous client for the users endpoint.

    Holds no mutable state besides its collaborators; concurrent calls
    share only the immutable configuration.
    """

    config: ClientConfig | None
    transport: HttpTransport
    codec: UserCodec

    async def create_user(self, name: str, email: str) -> CallOutcome:
        """
        Create a user from raw fields.

        Raises:
            InvalidUserRequest: name is empty or email lacks '@'
            ConfigurationError: Client has no base URL configured
        """
        return await self.execute(CreateUserRequest(name=name, email=email))

    async def execute(self, request: CreateUserRequest) -> CallOutcome:
        """
        Perform one create-user round trip.

        Args:
            request: Fully constructed request model

        Returns:
            CallOutcome carrying either the created user or the ClientError

        Raises:
            ConfigurationError: Client has no base URL configured
        """
        config = self._require_config()
        call = UserCall(request=request)
        http_request = build_create_user_request(request, self.codec)

        call.start()
        logger.debug("Dispatching %s %s", http_request.method, config.url_for(http_request.path))

        try:
            response = await asyncio.wait_for(
                self.transport.send(http_request), timeout=config.timeout_seconds
            )
            user = self._classify(response)
        except asyncio.TimeoutError:
            error = TransportError(f"No reply within {config.timeout_seconds}s")
            return self._fail(call, error)
        except ClientError as err:
            return self._fail(call, err)

        logger.info("User created: %s, ID: %s", user.name, user.id)
        return call.succeed(user)

    def enqueue(
        self, request: CreateUserRequest, callback: Callable[[CallOutcome], None]
    ) -> "asyncio.Task[CallOutcome]":
        """
        Schedule a call on the running event loop and report through a callback.

        The callback runs on the event loop exactly once with the outcome.
        If the returned task is cancelled before completing, the callback
        is never invoked.

        Raises:
            ConfigurationError: Client has no base URL configured
            RuntimeError: No event loop is running
        """
        self._require_config()
        task = asyncio.get_running_loop().create_task(self.execute(request))

        def _deliver(done: "asyncio.Task[CallOutcome]") -> None:
            if done.cancelled():
                logger.debug("Call for %s cancelled, outcome discarded", request.email)
                return
            error = done.exception()
            if error is not None:
                logger.error("Call for %s crashed", request.email, exc_info=error)
                return
            callback(done.result())

        task.add_done_callback(_deliver)
        return task

    async def aclose(self) -> None:
        """Release the transport."""
        await self.transport.aclose()

    async def __aenter__(self) -> "UsersClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _require_config(self) -> ClientConfig:
        if self.config is None:
            raise ConfigurationError("UsersClient used before a base URL was configured")
        return self.config

    def _classify(self, response: HttpResponse) -> CreatedUser:
        if not response.is_success:
            raise ServerError(response.status_code, response.body)
        return self.codec.decode(response.body)

    def _fail(self, call: UserCall, error: ClientError) -> CallOutcome:
        status = getattr(error, "status_code", None)
        if status is not None:
            logger.warning("Create user failed: %s (status %s)", type(error).__name__, status)
        else:
            logger.warning("Create user failed: %s: %s", type(error).__name__, error)
        return call.fail(error)

