from collections.abc import MutableMapping

from .mapping import CaselessDict


class HttpHeaders(CaselessDict):
    """The spec in https://datatracker.ietf.org/doc/html/rfc7230#section-3.2 states:

    Each header field consists of a case-insensitive field name.

    Field names keep the spelling they arrived with, boolean strings are cast on construction.
    """

    def __init__(self, target=None):
        super().__init__(target)
        self.cast_headers(self)

    def cast_headers(self, headers):
        for k, v in headers.items():
            if isinstance(v, str):
                if v.lower() == "true":
                    headers[k] = True
                elif v.lower() == "false":
                    headers[k] = False
            elif isinstance(v, MutableMapping):
                self.cast_headers(v)
