from __future__ import annotations

import pytest
from pydantic import ValidationError

from exercise_api.config import Settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.PAGE_SIZE == 10
    assert settings.RANDOM_SAMPLE_SIZE == 5
    assert settings.RECOMMENDATION_LIMIT == 5


@pytest.mark.parametrize("value", ["0", "-10"])
def test_page_size_must_be_positive(monkeypatch, value: str) -> None:
    monkeypatch.setenv("PAGE_SIZE", value)
    with pytest.raises(ValidationError):
        Settings()
