from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

import pytest

from vtscli.rpc.events import EventStream


class FakeClient:
    """Stands in for ``RpcClient``: canned responses, recorded requests.

    ``push_on_send`` items are pushed onto the event stream during the first
    request (the way the real client reports a token rotation).
    ``close_after_send`` ends the stream after the first request, like a
    server that disconnects.
    """

    def __init__(
        self,
        responses: Optional[Dict[str, Any]] = None,
        *,
        push_on_send: Iterable[Any] = (),
        close_after_send: bool = False,
        events: Optional[EventStream] = None,
    ) -> None:
        self.responses = dict(responses or {})
        self.push_on_send = list(push_on_send)
        self.close_after_send = close_after_send
        self.events = events if events is not None else EventStream()
        self.sent: List[Tuple[str, Optional[Dict[str, Any]]]] = []
        self.release_calls = 0
        self.stream_open_at_release: Optional[bool] = None

    @property
    def sent_types(self) -> List[str]:
        return [message_type for message_type, _ in self.sent]

    async def send(
        self, message_type: str, data: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        self.sent.append((message_type, data))
        for event in self.push_on_send:
            self.events.push(event)
        self.push_on_send = []
        if self.close_after_send:
            self.events.close()

        response = self.responses.get(message_type, {})
        if isinstance(response, BaseException):
            raise response
        return response

    async def release(self) -> None:
        self.release_calls += 1
        if self.stream_open_at_release is None:
            self.stream_open_at_release = not self.events.closed
        self.events.close()


@pytest.fixture
def make_client():
    return FakeClient
