from __future__ import annotations

from openstrenum import StringEnum, computed_member, member, skip_codec


class HttpMethod(StringEnum["HttpMethod"]):
    GET = member("GET")
    POST = member("POST")
    DELETE = member("DELETE")


class MediaType(StringEnum["MediaType"]):
    charset: str | None = None

    JSON = member("application/json", charset="utf-8")
    TEXT = member("text/plain", charset="utf-8")
    OCTET_STREAM = member("application/octet-stream")

    @computed_member
    def DEFAULT(cls):
        return cls("application/json", charset="utf-8")


@skip_codec
class Header(StringEnum["Header"]):
    required: bool = False

    CONTENT_TYPE = member("Content-Type", required=True)
    ACCEPT = member("Accept")
