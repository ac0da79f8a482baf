import pytest

from promptfit.builder import PromptBuilder


@pytest.fixture
def builder() -> PromptBuilder:
    return PromptBuilder(max_length=10)
