"""Tests for scheme resolution across multi-valued fields."""

import pytest

from pubident.errors import UnknownSchemeError
from pubident.identifiers import (
    PublicationIdentifier,
    cast,
    create,
    get_scheme,
    object_map,
    objects,
    scheme_names,
    split,
)

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_scheme_names_in_resolution_order() -> None:
    """Test checksum schemes are tried before shape-only schemes."""
    assert scheme_names() == ["isbn", "issn", "upc", "oclc", "lccn"]


@pytest.mark.unit
def test_get_scheme_is_case_insensitive() -> None:
    """Test lookup ignores case and surrounding space."""
    assert get_scheme(" ISSN ").name == "issn"
    assert get_scheme("Upc").label == "UPC"


@pytest.mark.unit
def test_get_scheme_unknown() -> None:
    """Test an unknown name lists the valid ones."""
    with pytest.raises(UnknownSchemeError, match="Valid schemes: isbn, issn"):
        get_scheme("doi")


# ---------------------------------------------------------------------------
# split
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_split_on_separators() -> None:
    """Test all separators and blank parts."""
    value = "ISSN 0378-5955 ; ocm123456789,036000291452 |\t lccn: 2001012345\n\n"

    assert split(value) == [
        "ISSN 0378-5955",
        "ocm123456789",
        "036000291452",
        "lccn: 2001012345",
    ]


@pytest.mark.unit
def test_split_iterable_and_none() -> None:
    """Test lists are flattened and None is empty."""
    assert split(["a, b", "c"]) == ["a", "b", "c"]
    assert split(None) == []
    assert split("   ") == []


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("ISSN 0378-5955", "issn:03785955"),
        ("0-306-40615-2", "isbn:9780306406157"),
        ("036000291452", "upc:036000291452"),
        ("ocm123456789", "oclc:123456789"),
        ("(OCoLC)1234", "oclc:00001234"),
        ("lccn: 2001012345", "lccn:2001012345"),
        ("n 79021164", "lccn:n 79021164"),
    ],
)
def test_create_resolves_scheme(text: str, expected: str) -> None:
    """Test each scheme is recognized from an unlabelled or labelled value."""
    identifier = create(text)

    assert identifier is not None
    assert identifier.valid
    assert str(identifier) == expected


@pytest.mark.unit
def test_create_first_valid_reading_wins() -> None:
    """Test an 8-digit value with a wrong ISSN check digit reads as OCN."""
    identifier = create("12345678")

    assert identifier == PublicationIdentifier("oclc", "12345678")


@pytest.mark.unit
def test_create_prefers_lccn_for_year_like_ten_digits() -> None:
    """Test an unlabelled 10-digit value starting with a year is an LCCN."""
    assert create("2001012345") == PublicationIdentifier("lccn", "2001012345")
    assert create("1999123456").scheme == "lccn"


@pytest.mark.unit
def test_create_invalid_reading() -> None:
    """Test the first candidate is returned, marked invalid, with label removed."""
    identifier = create("ISSN 0378-5950")

    assert identifier == PublicationIdentifier("issn", "0378-5950", valid=False)


@pytest.mark.unit
def test_create_invalid_reading_prefers_repairable_scheme() -> None:
    """Test a UPC with a wrong check digit is not read as a malformed ISBN."""
    identifier = create("036000291459")

    assert identifier == PublicationIdentifier("upc", "036000291459", valid=False)


@pytest.mark.unit
def test_create_restricted_schemes() -> None:
    """Test only the named schemes are tried."""
    assert create("036000291452", schemes=["UPC"]) == PublicationIdentifier("upc", "036000291452")
    assert create("036000291452", schemes=["isbn"]) == PublicationIdentifier(
        "isbn", "036000291452", valid=False
    )
    assert create("ISSN 0378-5955", schemes=["upc"]) is None


@pytest.mark.unit
def test_create_restricted_to_unknown_scheme() -> None:
    """Test an unknown name among the schemes raises."""
    with pytest.raises(UnknownSchemeError):
        create("036000291452", schemes=["upc", "doi"])


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   ", "not an identifier", "hello:world"])
def test_create_no_candidate(text: str) -> None:
    """Test values no scheme accepts give None."""
    assert create(text) is None


@pytest.mark.unit
def test_create_with_scheme() -> None:
    """Test an explicit scheme bypasses resolution."""
    assert create("12345678", scheme="lccn") == PublicationIdentifier("lccn", "12345678")
    assert create("12345678", scheme="ISSN").valid is False


@pytest.mark.unit
def test_create_with_unknown_scheme() -> None:
    """Test an unknown scheme name raises."""
    with pytest.raises(UnknownSchemeError):
        create("12345678", scheme="doi")


# ---------------------------------------------------------------------------
# cast / objects / object_map
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_cast() -> None:
    """Test invalid identifiers are dropped unless requested."""
    assert cast("ISSN 0378-5955") == PublicationIdentifier("issn", "03785955")
    assert cast("ISSN 0378-5950") is None
    assert cast("ISSN 0378-5950", invalid=True).valid is False
    assert cast("nothing") is None


@pytest.mark.unit
def test_objects() -> None:
    """Test results line up with split() unless invalid ones are dropped."""
    value = "ISSN 0378-5955; nothing; ocm123456789"

    with_invalid = objects(value)
    assert [str(i) if i else None for i in with_invalid] == [
        "issn:03785955",
        None,
        "oclc:123456789",
    ]
    assert [str(i) for i in objects(value, invalid=False)] == [
        "issn:03785955",
        "oclc:123456789",
    ]


@pytest.mark.unit
def test_object_map() -> None:
    """Test mapping from candidate string to identifier."""
    result = object_map(["036000291452", "nothing"])

    assert result == {
        "036000291452": PublicationIdentifier("upc", "036000291452"),
        "nothing": None,
    }
    assert object_map(["036000291452", "nothing"], invalid=False) == {
        "036000291452": PublicationIdentifier("upc", "036000291452"),
    }


@pytest.mark.unit
def test_publication_identifier_is_immutable() -> None:
    """Test identifiers are frozen values."""
    identifier = PublicationIdentifier("upc", "036000291452")

    with pytest.raises(AttributeError):
        identifier.value = "x"  # type: ignore[misc]
