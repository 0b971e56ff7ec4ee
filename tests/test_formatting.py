import pytest

from dynstr import FormatError
from dynstr.core.formatting import render


def test_render_bytes_template():
    rendered = render(b"%d %s test", 12, b"abc")
    assert rendered == bytearray(b"12 abc test\x00")
    assert len(rendered) == len(b"12 abc test") + 1


def test_render_str_template_encodes_utf8():
    assert render("%s!", "hé") == bytearray("hé!".encode('utf-8') + b"\x00")


def test_render_keyword_arguments():
    assert render(b"%(a)s-%(b)d", a=b"x", b=7) == bytearray(b"x-7\x00")


def test_render_keyword_arguments_with_str_template():
    assert render("%(a)s", a="x") == bytearray(b"x\x00")
    assert render("%(name)s=%(value)05.1f", name="pi", value=3.14159) == bytearray(b"pi=003.1\x00")


def test_render_keyword_missing_from_bytes_template():
    with pytest.raises(FormatError):
        render(b"%(a)s", b=b"x")


def test_render_without_arguments_processes_escapes():
    assert render(b"100%%") == bytearray(b"100%\x00")


def test_render_empty_output():
    assert render(b"") == bytearray(b"\x00")


def test_render_wide_output_is_not_truncated():
    rendered = render(b"%500d", 1)
    assert len(rendered) == 501
    assert rendered[499:] == bytearray(b"1\x00")


def test_render_errors_become_format_error():
    with pytest.raises(FormatError):
        render(b"%d", b"not a number")

    with pytest.raises(FormatError):
        render(b"%s %s", b"one")

    with pytest.raises(FormatError):
        render(b"%(missing)s", other=b"x")

    with pytest.raises(FormatError):
        render(b"%d", 1, extra=2)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        render("%q", 1)


def test_render_rejects_non_template():
    with pytest.raises(TypeError):
        render(42)
