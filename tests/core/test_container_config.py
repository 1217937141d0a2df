from __future__ import annotations

import pytest
from pydantic import ValidationError

from hiringslate.container import create_container
from hiringslate.core import DEFAULT_WEIGHTS


def test_create_container_defaults():
    container = create_container()

    pipeline = container.pipeline()

    assert pipeline.weights == DEFAULT_WEIGHTS
    assert pipeline.diversity is True
    assert container.selector() is container.selector()


def test_create_container_with_overrides():
    container = create_container(
        settings={"weights": {"experience": 1, "skills": 1, "salary": 2}, "diversity": False}
    )

    pipeline = container.pipeline()

    assert pipeline.weights.salary == 2
    assert pipeline.weights.normalized().salary == pytest.approx(0.5)
    assert pipeline.diversity is False


def test_create_container_rejects_zero_weights():
    with pytest.raises(ValidationError):
        create_container(settings={"weights": {"experience": 0, "skills": 0, "salary": 0}})
