"""JSON transport for syntax trees.

Every node encodes as an object tagged with its class name under the reserved
``"node"`` key; tuples encode as arrays. Decoding is strict: each field is read
against its annotation, and a payload the host could not have produced from a
well-formed tree raises :class:`HostContractError`.
"""

from __future__ import annotations

import json
from dataclasses import MISSING, fields
from types import NoneType, UnionType
from typing import Union, get_args, get_origin, get_type_hints

from recordsync.exceptions import HostContractError
from recordsync.invariants import never
from recordsync.json_types import JSONObject, JSONValue
from recordsync.syntax.nodes import NODE_TYPES, Node, TypeDeclaration

NODE_TAG = "node"

_NODES_BY_KIND: dict[str, type[Node]] = {node_type.__name__: node_type for node_type in NODE_TYPES}
_FIELD_HINTS: dict[type[Node], dict[str, object]] = {
    node_type: get_type_hints(node_type) for node_type in NODE_TYPES
}
# Defaults that are only meaningful for trees built in process.
_REQUIRED_ON_DECODE: dict[type[Node], tuple[str, ...]] = {
    TypeDeclaration: ("span", "open_brace"),
}


def encode(node: Node) -> JSONObject:
    payload: JSONObject = {NODE_TAG: type(node).__name__}
    for item in fields(node):
        payload[item.name] = _encode_value(getattr(node, item.name))
    return payload


def _encode_value(value: object) -> JSONValue:
    match value:
        case Node():
            return encode(value)
        case tuple():
            return [_encode_value(entry) for entry in value]
        case None | str() | int() | float() | bool():
            return value
        case _:
            raise HostContractError(
                "tree carries a value with no JSON form",
                value_type=type(value).__name__,
            )


def encode_text(node: Node) -> str:
    """Deterministic text form: identical trees give identical strings."""
    return json.dumps(
        encode(node),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def decode(payload: object) -> Node:
    if not isinstance(payload, dict):
        raise HostContractError(
            "tree payload must be a JSON object",
            payload_type=type(payload).__name__,
        )
    kind = payload.get(NODE_TAG)
    node_type = _NODES_BY_KIND.get(kind) if isinstance(kind, str) else None
    if node_type is None:
        raise HostContractError("unknown node kind", kind=kind)
    node_fields = {item.name: item for item in fields(node_type)}
    unknown = sorted(key for key in payload if key != NODE_TAG and key not in node_fields)
    if unknown:
        raise HostContractError(
            "unknown fields in tree payload",
            kind=kind,
            fields=",".join(unknown),
        )
    required = _REQUIRED_ON_DECODE.get(node_type, ())
    missing = sorted(
        name
        for name, item in node_fields.items()
        if name not in payload
        and (name in required or (item.default is MISSING and item.default_factory is MISSING))
    )
    if missing:
        raise HostContractError(
            "incomplete tree payload",
            kind=kind,
            fields=",".join(missing),
        )
    hints = _FIELD_HINTS[node_type]
    arguments = {
        key: _decode_field(value, hints[key], kind=kind, field=key)
        for key, value in payload.items()
        if key != NODE_TAG
    }
    node = node_type(**arguments)
    if isinstance(node, TypeDeclaration) and node.span.end <= node.span.start:
        raise HostContractError(
            "type declaration has an empty span",
            kind=kind,
            name=node.name,
        )
    return node


def _is_node_hint(hint: object) -> bool:
    return get_origin(hint) is None and isinstance(hint, type) and issubclass(hint, Node)


def _decode_field(value: object, hint: object, *, kind: str, field: str) -> object:
    origin = get_origin(hint)
    if origin is Union or origin is UnionType:
        options = get_args(hint)
        if value is None:
            if NoneType in options:
                return None
            raise _mismatch(value, hint, kind=kind, field=field)
        node_options = tuple(option for option in options if _is_node_hint(option))
        if isinstance(value, dict) and node_options:
            node = decode(value)
            if isinstance(node, node_options):
                return node
            raise _mismatch(value, hint, kind=kind, field=field)
        for option in options:
            if option is not NoneType and not _is_node_hint(option):
                return _decode_field(value, option, kind=kind, field=field)
        raise _mismatch(value, hint, kind=kind, field=field)
    if origin is tuple:
        if not isinstance(value, list):
            raise _mismatch(value, hint, kind=kind, field=field)
        arguments = get_args(hint)
        if len(arguments) == 2 and arguments[1] is Ellipsis:
            return tuple(
                _decode_field(entry, arguments[0], kind=kind, field=field) for entry in value
            )
        if len(value) != len(arguments):
            raise _mismatch(value, hint, kind=kind, field=field)
        return tuple(
            _decode_field(entry, argument, kind=kind, field=field)
            for entry, argument in zip(value, arguments)
        )
    if _is_node_hint(hint):
        node = decode(value)
        if not isinstance(node, hint):
            raise _mismatch(value, hint, kind=kind, field=field)
        return node
    if hint is str or hint is bool:
        if isinstance(value, hint):
            return value
        raise _mismatch(value, hint, kind=kind, field=field)
    if hint is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise _mismatch(value, hint, kind=kind, field=field)
    never("unsupported node field annotation", kind=kind, field=field, hint=hint)


def _mismatch(value: object, hint: object, *, kind: str, field: str) -> HostContractError:
    return HostContractError(
        "tree payload field has the wrong shape",
        kind=kind,
        field=field,
        expected=hint,
        value_type=type(value).__name__,
    )


def decode_text(text: str) -> Node:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise HostContractError("tree payload is not valid JSON", detail=str(exc)) from exc
    return decode(payload)
