import pytest
from pydantic import ValidationError

from promptfit.models import JsonSection, PromptSection, Section, SectionSource


def test_sections_satisfy_protocol():
    assert isinstance(PromptSection(text="x"), Section)
    assert isinstance(JsonSection(content={}), Section)


def test_prompt_section_is_frozen():
    section = PromptSection(source=SectionSource.USER, text="x")
    with pytest.raises(ValidationError):
        section.text = "y"


def test_json_section_keeps_non_ascii():
    section = JsonSection(source="system", content={"ciudad": "Córdoba"})
    assert "Córdoba" in section.get_text()


def test_json_section_without_content():
    assert JsonSection().get_text() is None
