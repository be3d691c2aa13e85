"""Form encoding of ActiveCampaign parameter structures.

A parameter structure is one of:

    Scalar     str | int | float | bool | None
    List       list/tuple of parameter structures (repeating groups)
    Map        mapping of str/int keys to parameter structures

Only three levels are given meaning by the API: flat pairs, one level of
repeating groups (``email[0]=...&p[0][12]=...``) and associative members
(``p[12]=12``). Anything nested deeper than that is dropped.
"""

import re
from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import quote_plus

FIELD_KEY_PATTERN = re.compile(r"^field\[.*,0\]")
MULTI_VALUE_SEPARATOR = "||"


def encode_params(params: Any) -> str:
    """Encode a parameter structure into a form body.

    Args:
        params: A parameter structure. A bare scalar (usually an already
            serialized string) is sent as a single ``data`` field.

    Returns:
        ``key=value`` pairs joined with ``&``, percent-encoded.
    """
    if not _is_structure(params):
        return f"data={_quote(params)}"

    pairs: list[str] = []
    for key, value in _entries(params):
        if not _is_structure(value):
            pairs.append(f"{key}={_quote(value)}")
        elif isinstance(key, int) and not isinstance(key, bool):
            pairs.extend(_encode_group(key, value))
        elif FIELD_KEY_PATTERN.match(str(key)):
            joined = MULTI_VALUE_SEPARATOR.join(_to_text(v) for _, v in _entries(value))
            pairs.append(f"{_quote(key)}={_quote(joined)}")
        else:
            pairs.extend(_encode_members(key, value))

    return "&".join(pairs).rstrip("& ")


def encode_query(params: Any) -> str:
    """Encode parameters for appending to a query string.

    Strings are assumed to be query strings already and pass through.
    """
    if isinstance(params, str):
        return params.strip("&")
    return encode_params(params)


def _encode_group(index: int, group: Any) -> Iterator[str]:
    """Encode one repeating group, e.g. the ``index``-th contact of a batch."""
    for name, value in _entries(group):
        if _is_structure(value):
            for inner_key, inner_value in _entries(value):
                yield f"{name}[{index}][{_quote(inner_key)}]={_quote(inner_value)}"
        else:
            yield f"{name}[{index}]={_quote(value)}"


def _encode_members(key: Any, members: Any) -> Iterator[str]:
    """Encode an associative sub-structure such as ``{"p": {2: 2, 3: 3}}``."""
    for member_key, member_value in _entries(members):
        # nested values are not representable at this level
        if not _is_structure(member_value):
            yield f"{key}[{_quote(member_key)}]={_quote(member_value)}"


def _is_structure(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _entries(structure: Any) -> Iterator[tuple[Any, Any]]:
    if isinstance(structure, Mapping):
        return iter(structure.items())
    return enumerate(structure)


def _to_text(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _quote(value: Any) -> str:
    return quote_plus(_to_text(value), safe="")
