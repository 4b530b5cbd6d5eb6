"""Dependency injection container for the screening system."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    CultureEvaluator,
    EducationEvaluator,
    ExperienceEvaluator,
    ScreeningEngine,
    SignalEvaluator,
    SkillEvaluator,
)
from .core.evaluators.culture import CultureConfig
from .core.evaluators.education import EducationConfig
from .core.evaluators.experience import ExperienceConfig
from .core.evaluators.signals import SignalConfig
from .core.evaluators.skills import SkillConfig
from .pipeline import ReaderRegistry, ScreeningPipeline
from .readers import PdfResumeReader, PlainTextReader
from .readers.pdf import PdfReaderConfig


class ScreeningContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    text_reader = providers.Singleton(PlainTextReader)
    pdf_reader = providers.Singleton(PdfResumeReader)

    reader_registry = providers.Singleton(
        ReaderRegistry,
        readers=providers.List(text_reader, pdf_reader),
    )

    skill_evaluator = providers.Singleton(SkillEvaluator)
    experience_evaluator = providers.Singleton(ExperienceEvaluator)
    culture_evaluator = providers.Singleton(CultureEvaluator)
    education_evaluator = providers.Singleton(EducationEvaluator)
    signal_evaluator = providers.Singleton(SignalEvaluator)

    evaluators = providers.List(
        skill_evaluator,
        experience_evaluator,
        culture_evaluator,
        education_evaluator,
        signal_evaluator,
    )

    screening_engine = providers.Singleton(
        ScreeningEngine,
        evaluators=evaluators,
        score_weights=config.score_weights,
        thresholds=config.thresholds,
        red_flag_penalty=config.red_flag_penalty,
        max_red_flags=config.max_red_flags,
    )

    pipeline = providers.Factory(
        ScreeningPipeline,
        engine=screening_engine,
        registry=reader_registry,
    )


_EVALUATOR_OVERRIDES = {
    "skills": ("skill_evaluator", SkillEvaluator, SkillConfig),
    "experience": ("experience_evaluator", ExperienceEvaluator, ExperienceConfig),
    "culture": ("culture_evaluator", CultureEvaluator, CultureConfig),
    "education": ("education_evaluator", EducationEvaluator, EducationConfig),
    "signals": ("signal_evaluator", SignalEvaluator, SignalConfig),
}


def create_container(*, settings: dict | None = None) -> ScreeningContainer:
    """Instantiate container with optional overrides."""

    container = ScreeningContainer()

    if not settings:
        return container

    core_settings = settings.get("core", {}) if isinstance(settings, dict) else {}
    if core_settings:
        container.config.from_dict(core_settings)

    evaluator_settings = settings.get("evaluators", {}) if isinstance(settings, dict) else {}

    for key, (provider_name, evaluator_cls, config_cls) in _EVALUATOR_OVERRIDES.items():
        if key not in evaluator_settings:
            continue
        evaluator_config = config_cls(**evaluator_settings[key])
        getattr(container, provider_name).override(
            providers.Singleton(evaluator_cls, config=evaluator_config)
        )

    reader_settings = settings.get("readers", {}) if isinstance(settings, dict) else {}

    if "pdf" in reader_settings:
        pdf_config = PdfReaderConfig(**reader_settings["pdf"])
        container.pdf_reader.override(providers.Singleton(PdfResumeReader, config=pdf_config))

    return container
