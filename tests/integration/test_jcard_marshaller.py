"""
Integration tests for the jCard marshaller.

Tests: VCard -> jCard JSON, with the same gating rules as xCard.
"""

import io
import json
from pathlib import Path

import pytest

from vcardio.contexts.marshalling.jcard import JCardMarshaller
from vcardio.contexts.marshalling.settings import MarshallingSettings
from vcardio.contexts.types.builder import load_vcards
from vcardio.contexts.types.text_list_types import CategoriesType, NicknameType
from vcardio.contexts.types.text_types import FormattedNameType, MailerType, TextType
from vcardio.contexts.types.vcard import VCard
from vcardio.contexts.types.versions import VCardVersion

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


def _named_vcard(*props) -> VCard:
    vcard = VCard()
    vcard.formatted_name = FormattedNameType("Anna Smith")
    for prop in props:
        vcard.add_type(prop)
    return vcard


@pytest.mark.integration
def test_record_structure():
    nickname = NicknameType(["Anna", "Ann"])
    nickname.sub_types.pref = 1
    nickname.sub_types.value = "text"

    result = JCardMarshaller(add_generator=False).add_vcard(_named_vcard(nickname))

    assert result.warnings == []
    assert result.element == [
        "vcard",
        [
            ["version", {}, "text", "4.0"],
            ["fn", {}, "text", "Anna Smith"],
            ["nickname", {"pref": "1"}, "text", "Anna", "Ann"],
        ],
    ]


@pytest.mark.integration
def test_group_and_multi_valued_parameters():
    nickname = NicknameType(["Anna"], group="home")
    nickname.sub_types.add_type("home")
    nickname.sub_types.add_type("personal")

    result = JCardMarshaller(add_generator=False).add_vcard(_named_vcard(nickname))

    entry = result.element[1][2]
    assert entry[1] == {"group": "home", "type": ["home", "personal"]}


@pytest.mark.integration
def test_empty_list_still_has_one_value():
    result = JCardMarshaller(add_generator=False).add_vcard(_named_vcard(CategoriesType()))

    assert result.element[1][2] == ["categories", {}, "text", ""]


@pytest.mark.integration
def test_gating_and_skip_warnings():
    marshaller = JCardMarshaller(add_generator=False)
    result = marshaller.add_vcard(_named_vcard(MailerType("ExampleMail"), TextType("NOTE")))

    names = [entry[0] for entry in result.element[1]]
    assert names == ["version", "fn"]
    assert len(result.warnings) == 2
    assert result.warnings[1] == "NOTE type has requested that it not be marshalled."


@pytest.mark.integration
def test_version_record_follows_target():
    marshaller = JCardMarshaller(target_version=VCardVersion.V3_0, add_generator=False)
    result = marshaller.add_vcard(_named_vcard(MailerType("ExampleMail")))

    assert result.element[1][0] == ["version", {}, "text", "3.0"]
    assert result.element[1][2] == ["mailer", {}, "text", "ExampleMail"]


@pytest.mark.integration
def test_from_settings_and_write():
    settings = MarshallingSettings(add_generator=True)
    marshaller = JCardMarshaller.from_settings(settings)
    for vcard in load_vcards(FIXTURES_PATH / "vcards.yaml"):
        marshaller.add_vcard(vcard)

    buffer = io.StringIO()
    marshaller.write(buffer, indent=2)
    document = json.loads(buffer.getvalue())

    assert len(document) == 3
    assert document == json.loads(marshaller.to_string())
    anna = document[0][1]
    assert ["org", {"group": "work"}, "text", "Acme Inc.", "Research"] in anna
    assert ["x-spouse", {"group": "family"}, "unknown", "Bob Smith"] in anna
    assert anna[-1][0] != "x-generator"
    assert any(entry[0] == "x-generator" for entry in anna)


class _NoisyType(TextType):
    """Text property that warns every time it is marshalled."""

    def _marshal_text(self, version, warnings, compatibility_mode):
        warnings.append("noisy value")
        return super()._marshal_text(version, warnings, compatibility_mode)

    def _marshal_json(self, version, warnings):
        warnings.append("noisy value")
        return super()._marshal_json(version, warnings)


@pytest.mark.integration
def test_property_warning_reported_once():
    result = JCardMarshaller(add_generator=False).add_vcard(
        _named_vcard(_NoisyType("X-NOISY", "hello"))
    )

    assert result.warnings == ["noisy value"]
    assert result.element[1][2] == ["x-noisy", {}, "text", "hello"]
