import logging

from abstract_factory.core.abstract_database import (
    Connection,
    DatabaseFactory,
    QueryBuilder,
    Record,
)
from abstract_factory.implementation.registry import resolve_factory

# Configure logging for this module
logger = logging.getLogger(__name__)


# --- MySQL ---

class MySQLConnection(Connection):
    variation = "MySQL"

    def set_connection(self) -> str:
        return "MySQL DB connected"


class MySQLRecord(Record):
    variation = "MySQL"

    def add_record(self) -> str:
        return "Record added to MySQL DB"


class MySQLQueryBuilder(QueryBuilder):
    variation = "MySQL"

    def query(self) -> str:
        return "MySQL DB query was executed successfully"


# --- PostgreSQL ---

class PostgreSQLConnection(Connection):
    variation = "PostgreSQL"

    def set_connection(self) -> str:
        return "PostgreSQL DB connected"


class PostgreSQLRecord(Record):
    variation = "PostgreSQL"

    def add_record(self) -> str:
        return "Record added to PostgreSQL DB"


class PostgreSQLQueryBuilder(QueryBuilder):
    variation = "PostgreSQL"

    def query(self) -> str:
        return "PostgreSQL DB query was executed successfully"


# --- Oracle ---

class OracleConnection(Connection):
    variation = "Oracle"

    def set_connection(self) -> str:
        return "Oracle DB connected"


class OracleRecord(Record):
    variation = "Oracle"

    def add_record(self) -> str:
        return "Record added to Oracle DB"


class OracleQueryBuilder(QueryBuilder):
    variation = "Oracle"

    def query(self) -> str:
        return "Oracle DB query was executed successfully"


# --- Factories ---

class MySQLFactory(DatabaseFactory):
    """
    Builds the MySQL driver family: connection, record and query builder.
    """

    variation = "MySQL"

    def db_connection(self) -> Connection:
        logger.debug("MySQLFactory: creating MySQLConnection")
        return MySQLConnection()

    def db_record(self) -> Record:
        logger.debug("MySQLFactory: creating MySQLRecord")
        return MySQLRecord()

    def db_query_builder(self) -> QueryBuilder:
        logger.debug("MySQLFactory: creating MySQLQueryBuilder")
        return MySQLQueryBuilder()


class PostgreSQLFactory(DatabaseFactory):
    """
    Builds the PostgreSQL driver family.
    """

    variation = "PostgreSQL"

    def db_connection(self) -> Connection:
        logger.debug("PostgreSQLFactory: creating PostgreSQLConnection")
        return PostgreSQLConnection()

    def db_record(self) -> Record:
        logger.debug("PostgreSQLFactory: creating PostgreSQLRecord")
        return PostgreSQLRecord()

    def db_query_builder(self) -> QueryBuilder:
        logger.debug("PostgreSQLFactory: creating PostgreSQLQueryBuilder")
        return PostgreSQLQueryBuilder()


class OracleFactory(DatabaseFactory):
    variation = "Oracle"

    def db_connection(self) -> Connection:
        logger.debug("OracleFactory: creating OracleConnection")
        return OracleConnection()

    def db_record(self) -> Record:
        logger.debug("OracleFactory: creating OracleRecord")
        return OracleRecord()

    def db_query_builder(self) -> QueryBuilder:
        logger.debug("OracleFactory: creating OracleQueryBuilder")
        return OracleQueryBuilder()


DATABASE_FACTORIES = {
    MySQLFactory.variation: MySQLFactory,
    PostgreSQLFactory.variation: PostgreSQLFactory,
    OracleFactory.variation: OracleFactory,
}


def get_database_factory(name: str) -> DatabaseFactory:
    """Returns a new database factory for the given variation name."""
    return resolve_factory(DATABASE_FACTORIES, name, "database")
