"""Postman Collection v2.0.0 models.

Field names and aliases follow the collection file format. Every model
drops its empty keys on serialization, so the JSON only carries what a
request actually defines.
"""

import json
import re
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from postmanify.errors import SerializationError

SCHEMA_URL = "https://schema.getpostman.com/json/collection/v2.0.0/collection.json"

_URL_PATTERN = re.compile(r"^([a-z][a-z0-9+.-]*)://([^/]+)(?:/(.*))?$")


class PostmanModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Keys whose empty values are still written; only None drops them.
    keep_empty: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def omit_empty(self, handler):
        data = handler(self)
        return {
            k: v
            for k, v in data.items()
            if v is not None and (k in self.keep_empty or (v != "" and v != [] and v != {}))
        }


class Header(PostmanModel):
    key: str
    value: str = ""


class UrlVariable(PostmanModel):
    id: str
    value: Any = None

    keep_empty = frozenset({"value"})


class QueryParam(PostmanModel):
    key: str
    value: Any = None

    keep_empty = frozenset({"value"})


class Url(PostmanModel):
    raw: str = ""
    protocol: str = ""
    host: list[str] = []
    path: list[str] = []
    variable: list[UrlVariable] = []
    query: list[QueryParam] = []

    @classmethod
    def from_raw(cls, raw_url: str) -> "Url":
        """Split a composed URL into protocol, dot-separated host and path segments."""
        raw_url = raw_url.strip()
        match = _URL_PATTERN.match(raw_url)
        if not match:
            return cls(raw=raw_url)

        protocol, hostname, path = match.groups()
        return cls(
            raw=raw_url,
            protocol=protocol,
            host=[part for part in hostname.split(".") if part],
            path=[part for part in (path or "").split("/") if part],
        )


class FormDataParam(PostmanModel):
    key: str
    value: str = ""
    type: str = "text"
    enabled: bool = False


class Body(PostmanModel):
    mode: str = "raw"  # raw / formdata
    raw: str = ""
    formdata: list[FormDataParam] = []


class Request(PostmanModel):
    url: Url
    method: str
    header: list[Header] = []
    body: Body | None = None


class Script(PostmanModel):
    type: str = "text/javascript"
    exec: list[str] = []


class Event(PostmanModel):
    listen: str
    script: Script


class RequestItem(PostmanModel):
    name: str
    event: list[Event] = []
    request: Request


class Folder(PostmanModel):
    name: str
    item: list[RequestItem] = []


class CollectionInfo(PostmanModel):
    name: str = ""
    description: str = ""
    schema_url: str = Field(default=SCHEMA_URL, alias="schema")


class Collection(PostmanModel):
    info: CollectionInfo
    item: list[Folder] = []

    def add_item(self, item: RequestItem, folder: str) -> None:
        """Append an item to the named folder, creating the folder on first use."""
        for existing in self.item:
            if existing.name == folder:
                existing.item.append(item)
                return
        self.item.append(Folder(name=folder, item=[item]))

    def to_json(self) -> str:
        """Render the collection as 2-space indented JSON."""
        try:
            data = self.model_dump(mode="json", by_alias=True)
            return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode collection: {e}") from e
