"""Dependency injection container for the slate builder."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import CategoryMatcher, CategoryScorer, TeamSelector
from .pipeline import CandidateLoader, OutputWriter, SlatePipeline
from .schemas import load_config


class SlateContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    matcher = providers.Singleton(CategoryMatcher)

    scorer = providers.Singleton(CategoryScorer, matcher=matcher)

    selector = providers.Singleton(TeamSelector, scorer=scorer)

    candidate_loader = providers.Singleton(CandidateLoader)
    writer = providers.Singleton(OutputWriter)

    pipeline = providers.Factory(
        SlatePipeline,
        selector=selector,
        weights=config.weights,
        diversity=config.diversity,
        candidate_loader=candidate_loader,
        writer=writer,
    )


def create_container(*, settings: dict | None = None) -> SlateContainer:
    """Instantiate container with optional overrides.

    ``settings`` is validated through :class:`~hiringslate.schemas.AppConfig`
    so bad weights fail here rather than mid-run.
    """

    container = SlateContainer()

    if not settings:
        return container

    app_config = load_config(settings)
    container.config.override(app_config.to_settings())
    return container
