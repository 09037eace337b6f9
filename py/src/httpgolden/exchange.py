from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from httpgolden.request import Request
from httpgolden.response import Response
from httpgolden.util import to_bytes


@dataclass(frozen=True, slots=True)
class Exchange:
    request: Request
    response: Response

    @property
    def status(self) -> int:
        return self.response.status

    @property
    def body(self) -> bytes:
        return self.response.body

    def with_body(self, body: bytes | str) -> Exchange:
        response = dataclasses.replace(self.response, body=to_bytes(body))
        return dataclasses.replace(self, response=response)
