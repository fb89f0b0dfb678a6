"""
Integration tests for the plain-text vCard writer.
"""

import io
from pathlib import Path

import pytest

from vcardio.contexts.marshalling.text import VCardTextWriter, format_parameters
from vcardio.contexts.types.builder import load_vcards
from vcardio.contexts.types.sub_types import VCardSubTypes
from vcardio.contexts.types.text_list_types import NicknameType, OrganizationType
from vcardio.contexts.types.text_types import FormattedNameType, MemberType
from vcardio.contexts.types.vcard import VCard
from vcardio.contexts.types.versions import VCardVersion

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.mark.integration
def test_write_single_vcard():
    vcard = VCard()
    vcard.formatted_name = FormattedNameType("Smith, Anna")
    nickname = vcard.add_type(NicknameType(["Anna", "Ann"]))
    nickname.sub_types.pref = 1
    vcard.add_type(OrganizationType(["Acme", "Research"], group="work"))

    stream = io.StringIO()
    writer = VCardTextWriter(stream, add_generator=False)
    result = writer.write(vcard)

    assert result.warnings == []
    assert stream.getvalue() == (
        "BEGIN:VCARD\r\n"
        "VERSION:4.0\r\n"
        "FN:Smith\\, Anna\r\n"
        "NICKNAME;PREF=1:Anna,Ann\r\n"
        "work.ORG:Acme;Research\r\n"
        "END:VCARD\r\n"
    )
    assert result.element == stream.getvalue()
    assert len(writer) == 1


@pytest.mark.integration
def test_parameter_values_quoted():
    params = VCardSubTypes({"type": ["home", "a,b"], "label": "x:y"})

    assert format_parameters(params) == ';TYPE=home,"a,b";LABEL="x:y"'


@pytest.mark.integration
def test_member_rule_applies():
    vcard = VCard()
    vcard.formatted_name = FormattedNameType("Club")
    vcard.add_type(MemberType("urn:uuid:1"))

    stream = io.StringIO()
    result = VCardTextWriter(stream, add_generator=False).write(vcard)

    assert "MEMBER" not in stream.getvalue()
    assert len(result.warnings) == 1


@pytest.mark.integration
def test_fixture_at_version_3():
    stream = io.StringIO()
    writer = VCardTextWriter(stream, target_version=VCardVersion.V3_0)
    results = [writer.write(vcard) for vcard in load_vcards(FIXTURES_PATH / "vcards.yaml")]

    text = stream.getvalue()
    assert text.count("BEGIN:VCARD\r\n") == 3
    assert "VERSION:3.0\r\n" in text
    assert "family.X-SPOUSE:Bob Smith\r\n" in text
    assert "MAILER:ExampleMail 2.0\r\n" in text
    assert "X-GENERATOR:vcardio v" in text

    # KIND and MEMBER are vCard 4.0 only
    club = results[1]
    assert "KIND" not in club.element
    assert len(club.warnings) == 3
    assert writer.warnings == results[2].warnings


@pytest.mark.integration
def test_line_breaks_never_split_a_property():
    """Line breaks and quotes in extended values and parameters stay inside one line."""
    vcard = VCard()
    vcard.formatted_name = FormattedNameType("Anna")
    nickname = vcard.add_type(NicknameType(["x"]))
    nickname.sub_types.put("X-P", 'a"b\nc')
    vcard.add_extended_type("X-NOTE", "line1\nline2\r\nline3")

    stream = io.StringIO()
    VCardTextWriter(stream, add_generator=False).write(vcard)
    lines = stream.getvalue().split("\r\n")

    assert lines[-1] == ""
    assert all("\n" not in line and "\r" not in line for line in lines)
    assert "NICKNAME;X-P=a^'b^nc:x" in lines
    assert "X-NOTE:line1\\nline2\\nline3" in lines


@pytest.mark.integration
def test_parameter_caret_encoding():
    params = VCardSubTypes({"label": 'say "hi"\nto ^you, now'})

    assert format_parameters(params) == ";LABEL=\"say ^'hi^'^nto ^^you, now\""
