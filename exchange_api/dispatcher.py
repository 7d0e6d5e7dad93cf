"""
Dispatcher: the single request/response cycle every exchange command goes through.
Attaches the bearer token, sends one POST, classifies the outcome and reports it
to the configured callbacks before returning or raising.
"""
import asyncio
import inspect
import logging
from typing import Any

import requests

from exchange_api.errors import CommandError, ExchangeClientError, os_error_code
from exchange_api.handle_requests import RequestHandler
from exchange_api.session import SessionState
from exchange_data.models.options import Callback, CallOptions, ClientOptions
from exchange_data.models.responses import ApiResponse


async def _notify(listener: Callback, error_message: str | None, result: Any):
    outcome = listener(error_message, result)
    if inspect.isawaitable(outcome):
        await outcome


class Dispatcher:
    def __init__(self, http: RequestHandler, state: SessionState, options: ClientOptions):
        self.http = http
        self.state = state
        self.options = options

    def listeners(self, call_options: CallOptions | None) -> list[Callback]:
        """Global callback first, per-call callback second."""
        listeners = []
        if callable(self.options.global_callback):
            listeners.append(self.options.global_callback)
        if call_options is not None and callable(call_options.callback):
            listeners.append(call_options.callback)
        return listeners

    async def dispatch(self, command: str, parameters: dict, call_options: CallOptions | None = None) -> Any:
        """
        Run one command against the server.
        Returns the decoded ``result`` on success. On failure the composed error is
        reported to the callbacks, then raised as a CommandError unless a callback
        handled it and throw_handled_errors is off (in which case None is returned).
        """
        try:
            token = await self._resolve_token()
            label = self.state.log_label()
            if self.options.log_requests:
                logging.info(f"{label} -->> Server [{command}] {parameters}")

            response = await self._post(command, parameters, token)
            api_response = self._decode(response)

            if self.options.log_responses:
                logging.info(f"{label} <<-- Server [{command}] {api_response.body}")

            if api_response.error:
                raise ExchangeClientError.api(api_response.error)
        except ExchangeClientError as error:
            return await self._fail(command, error, call_options)

        for listener in self.listeners(call_options):
            await _notify(listener, None, api_response.result)
        return api_response.result

    async def _resolve_token(self) -> str | None:
        try:
            return await self.state.bearer_token()
        except Exception as e:
            raise ExchangeClientError.generic(f"Unable to obtain a session token: {e}", code=os_error_code(e)) from e

    async def _post(self, command: str, parameters: dict, token: str | None) -> requests.Response | None:
        try:
            return await asyncio.to_thread(self.http.post_json, command, token, parameters)
        except (requests.ConnectionError, requests.Timeout) as e:
            logging.debug(f"No response for [{command}]: {e}")
            raise ExchangeClientError.empty_response(code=os_error_code(e)) from e
        except requests.RequestException as e:
            raise ExchangeClientError.generic(str(e), code=os_error_code(e)) from e
        except Exception as e:
            # Request construction: unserializable parameters, unencodable headers.
            raise ExchangeClientError.generic(str(e), code=os_error_code(e)) from e

    def _decode(self, response: requests.Response | None) -> ApiResponse:
        if response is None:
            raise ExchangeClientError.empty_response()
        if not response.ok:
            raise ExchangeClientError.network(response.status_code, response.reason)
        try:
            body = response.json()
        except ValueError as e:
            raise ExchangeClientError.generic(f"Invalid JSON in response: {e}") from e
        if not isinstance(body, dict):
            raise ExchangeClientError.generic(f"Unexpected response body: {body!r}")
        return ApiResponse.from_body(body)

    async def _fail(self, command: str, error: ExchangeClientError, call_options: CallOptions | None) -> None:
        command_error = CommandError(command, error)
        logging.warning(command_error.message)

        handled = False
        for listener in self.listeners(call_options):
            await _notify(listener, command_error.message, None)
            handled = True

        if self.options.throw_handled_errors or not handled:
            raise command_error from error
        return None
