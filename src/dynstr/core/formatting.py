"""
Printf-style rendering shared by the formatted buffer operations.
"""

from typing import Any, Union

from .alloc import allocate
from .errors import FormatError

Template = Union[bytes, bytearray, str]


def _interpolate(template: Template, args: tuple, kwargs: dict) -> bytes:
    if isinstance(template, str):
        return (template % (kwargs or args)).encode('utf-8')

    # bytes templates look mapping keys up as bytes.
    values: Any = {key.encode('ascii'): value for key, value in kwargs.items()} if kwargs else args
    return bytes(template) % values


def render(template: Template, *args: Any, **kwargs: Any) -> bytearray:
    """
    Render a printf-style template into freshly allocated storage.

    The rendered length is measured first, then exactly that many bytes
    plus a terminator are allocated and filled. Positional arguments use
    ``%d``/``%s`` substitution, keyword arguments use ``%(name)s``.

    Args:
        template: bytes or str template (str output is encoded as UTF-8)
        *args: Positional values for the template
        **kwargs: Mapping values for the template

    Returns:
        bytearray: Rendered bytes followed by a single zero terminator

    Raises:
        FormatError: If the template and arguments do not match
    """

    if not isinstance(template, (bytes, bytearray, str)):
        raise TypeError(f"Template must be str or bytes, not {type(template).__name__}")

    if args and kwargs:
        raise FormatError("Cannot mix positional and keyword format arguments")

    try:
        rendered = _interpolate(template, args, kwargs)
    except (TypeError, ValueError, KeyError) as exc:
        raise FormatError(f"Failed to render template {template!r}: {exc}") from exc

    size = len(rendered)
    payload = allocate(size + 1)
    payload[:size] = rendered
    return payload
