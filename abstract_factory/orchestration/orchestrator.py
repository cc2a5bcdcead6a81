import logging
import sys
from typing import Callable, Sequence, TextIO

# Імпортуємо абстрактні класи замість конкретних реалізацій
from abstract_factory.core.abstract_furniture import FurnitureFactory
from abstract_factory.core.abstract_database import DatabaseFactory

from abstract_factory.orchestration.clients import database_client_code, furniture_client_code

logger = logging.getLogger(__name__)

ORDINALS = ["first", "second", "third", "fourth", "fifth", "sixth", "seventh", "eighth", "ninth", "tenth"]


def _ordinal(index: int) -> str:
    """Returns the English ordinal for a zero-based index ("first", "second", ...)."""
    if index < len(ORDINALS):
        return ORDINALS[index]
    number = index + 1
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def client_header(index: int) -> str:
    """Header line printed before running the client with the factory at `index`."""
    if index == 0:
        return "Client: Testing client code with the first factory type:"
    return f"Client: Testing the same client code with the {_ordinal(index)} factory type:"


class DemoOrchestrator:
    """
    Runs the same client code against every injected factory, showing that
    swapping the factory swaps the whole product family without touching the client.
    """

    # Конструктор приймає абстракції як аргументи
    def __init__(
        self,
        furniture_factories: Sequence[FurnitureFactory] = (),
        database_factories: Sequence[DatabaseFactory] = (),
        out: TextIO | None = None,
    ):
        self.furniture_factories = list(furniture_factories)
        self.database_factories = list(database_factories)
        self.out = out or sys.stdout

        logger.info(
            f"DemoOrchestrator initialized with {len(self.furniture_factories)} furniture "
            f"and {len(self.database_factories)} database factories."
        )

    def _run_section(self, factories: list, client: Callable[..., list[str]]) -> None:
        for index, factory in enumerate(factories):
            if index > 0:
                self.out.write("\n")
            self.out.write(client_header(index) + "\n")
            logger.info(f"Running {client.__name__} with {type(factory).__name__}")
            client(factory, self.out)

    def run_furniture_demo(self) -> None:
        self._run_section(self.furniture_factories, furniture_client_code)

    def run_database_demo(self) -> None:
        self._run_section(self.database_factories, database_client_code)

    def run_demo(self) -> None:
        """Runs the furniture section, then the database section, separated by a blank line."""
        logger.info("Starting abstract factory demo.")
        self.run_furniture_demo()
        if self.furniture_factories and self.database_factories:
            self.out.write("\n")
        self.run_database_demo()
        logger.info("Demo finished.")
