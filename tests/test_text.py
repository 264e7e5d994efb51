import pytest

from ocr_field_generator.text import camel_case, normalize_text


def test_normalize_text_collapses_whitespace() -> None:
    assert normalize_text("  Invoice \t Number\n") == "Invoice Number"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Invoice Number:", "invoiceNumber"),
        ("PO #", "po"),
        ("Owner's Name", "ownersName"),
        ("HTTPServer Port", "httpServerPort"),
        ("Phone No. 2", "phoneNo2"),
        ("ship_to-address", "shipToAddress"),
        ("fooBar", "fooBar"),
        ("###", ""),
        ("", ""),
    ],
)
def test_camel_case(text: str, expected: str) -> None:
    assert camel_case(text) == expected
