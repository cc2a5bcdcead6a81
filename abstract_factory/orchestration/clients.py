import logging
import sys
from typing import TextIO

# Імпортуємо лише абстрактні класи: клієнт не знає про конкретні фабрики
from abstract_factory.core.abstract_furniture import FurnitureFactory
from abstract_factory.core.abstract_database import DatabaseFactory

logger = logging.getLogger(__name__)


def _write_lines(lines: list[str], out: TextIO) -> list[str]:
    for line in lines:
        out.write(line + "\n")
    return lines


def furniture_client_code(factory: FurnitureFactory, out: TextIO | None = None) -> list[str]:
    """
    Client routine for the furniture family.
    Works with the factory and products only through their abstract types,
    so any FurnitureFactory can be passed in.

    Args:
        factory (FurnitureFactory): Factory used to create the table and the sofa.
        out (TextIO): Sink the result lines are written to.

    Returns:
        list[str]: The lines written to the sink, in order.
    """
    product_table = factory.create_table()
    product_sofa = factory.create_sofa()

    lines = [
        product_sofa.useful_function_b(),
        product_sofa.another_useful_function_b(product_table),
    ]
    logger.debug(f"Furniture client produced {len(lines)} lines using {type(factory).__name__}")
    return _write_lines(lines, out or sys.stdout)


def database_client_code(factory: DatabaseFactory, out: TextIO | None = None) -> list[str]:
    """
    Client routine for the database family.
    Creates a connection, a record and a query builder, then writes the result
    of each one's operation in that order.
    """
    connection = factory.db_connection()
    record = factory.db_record()
    query_builder = factory.db_query_builder()

    lines = [
        connection.set_connection(),
        record.add_record(),
        query_builder.query(),
    ]
    logger.debug(f"Database client produced {len(lines)} lines using {type(factory).__name__}")
    return _write_lines(lines, out or sys.stdout)
