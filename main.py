import logging
import sys

from abstract_factory.orchestration.orchestrator import DemoOrchestrator

# Імпортуємо резолвери конкретних фабрик, які будемо передавати оркестратору
from abstract_factory.implementation.furniture import get_furniture_factory
from abstract_factory.implementation.database import get_database_factory

import config # Потрібен для вибору вариацій, що демонструються

logger = logging.getLogger(__name__) # Logger for the main script


def configure_logging(level: str = config.LOG_LEVEL):
    """Configures logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_orchestrator(
    furniture_variations: list[str] = config.FURNITURE_VARIATIONS,
    database_variations: list[str] = config.DATABASE_VARIATIONS,
    out=None,
) -> DemoOrchestrator:
    """
    Resolves the configured variations to factories and injects them into a DemoOrchestrator.

    Raises:
        ValueError: If a configured variation has no factory.
    """
    # 1. Створюємо конкретні фабрики
    furniture_factories = [get_furniture_factory(name) for name in furniture_variations]
    database_factories = [get_database_factory(name) for name in database_variations]

    # 2. Передаємо (ін'єктуємо) їх в DemoOrchestrator
    return DemoOrchestrator(
        furniture_factories=furniture_factories,
        database_factories=database_factories,
        out=out
    )


def main() -> int:
    logger.info("Application started. Initializing DemoOrchestrator.")
    try:
        orchestrator = build_orchestrator()
    except ValueError as e:
        logger.error(f"✗ Invalid configuration: {e}")
        return 1

    orchestrator.run_demo()
    logger.info("Application finished.")
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
