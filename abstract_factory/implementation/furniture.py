import logging

from abstract_factory.core.abstract_furniture import FurnitureFactory, Sofa, Table
from abstract_factory.implementation.registry import resolve_factory

logger = logging.getLogger(__name__)


# --- Tables ---

class ArDekoTable(Table):
    variation = "ArDeko"

    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ModernTable(Table):
    variation = "Modern"

    def useful_function_a(self) -> str:
        return "The result of the product A2."


# --- Sofas ---

class ArDekoSofa(Sofa):
    """
    Sofa B1. Works correctly only with table A1, but accepts any Table.
    """

    variation = "ArDeko"

    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def another_useful_function_b(self, collaborator: Table) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B1 collaborating with the ({result})"


class ModernSofa(Sofa):
    """
    Sofa B2. Works correctly only with table A2, but accepts any Table.
    """

    variation = "Modern"

    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def another_useful_function_b(self, collaborator: Table) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B2 collaborating with the ({result})"


# --- Factories ---

class ArDekoFactory(FurnitureFactory):
    """
    Produces the ArDeko furniture family.
    Return types are the abstract products, the instances are ArDeko ones.
    """

    variation = "ArDeko"

    def create_table(self) -> Table:
        logger.debug("ArDekoFactory: creating ArDekoTable")
        return ArDekoTable()

    def create_sofa(self) -> Sofa:
        logger.debug("ArDekoFactory: creating ArDekoSofa")
        return ArDekoSofa()


class ModernFactory(FurnitureFactory):
    """Produces the Modern furniture family."""

    variation = "Modern"

    def create_table(self) -> Table:
        logger.debug("ModernFactory: creating ModernTable")
        return ModernTable()

    def create_sofa(self) -> Sofa:
        logger.debug("ModernFactory: creating ModernSofa")
        return ModernSofa()


FURNITURE_FACTORIES = {
    ArDekoFactory.variation: ArDekoFactory,
    ModernFactory.variation: ModernFactory,
}


def get_furniture_factory(name: str) -> FurnitureFactory:
    """Returns a new furniture factory for the given variation name."""
    return resolve_factory(FURNITURE_FACTORIES, name, "furniture")
