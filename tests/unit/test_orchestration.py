import io

import pytest

from abstract_factory.implementation.database import MySQLFactory, OracleFactory, PostgreSQLFactory
from abstract_factory.implementation.furniture import ArDekoFactory, ModernFactory
from abstract_factory.orchestration.clients import database_client_code, furniture_client_code
from abstract_factory.orchestration.orchestrator import DemoOrchestrator, client_header


@pytest.mark.unit
def test_furniture_client_writes_sofa_lines() -> None:
    sink = io.StringIO()
    lines = furniture_client_code(ArDekoFactory(), sink)

    assert lines == [
        "The result of the product B1.",
        "The result of the B1 collaborating with the (The result of the product A1.)",
    ]
    assert sink.getvalue() == "\n".join(lines) + "\n"


@pytest.mark.unit
def test_database_client_swapping_factory_swaps_all_lines() -> None:
    mysql_sink = io.StringIO()
    oracle_sink = io.StringIO()

    database_client_code(MySQLFactory(), mysql_sink)
    database_client_code(OracleFactory(), oracle_sink)

    assert mysql_sink.getvalue() == (
        "MySQL DB connected\n"
        "Record added to MySQL DB\n"
        "MySQL DB query was executed successfully\n"
    )
    assert oracle_sink.getvalue() == (
        "Oracle DB connected\n"
        "Record added to Oracle DB\n"
        "Oracle DB query was executed successfully\n"
    )


@pytest.mark.unit
def test_client_header_ordinals() -> None:
    assert client_header(0) == "Client: Testing client code with the first factory type:"
    assert client_header(1) == "Client: Testing the same client code with the second factory type:"
    assert client_header(2) == "Client: Testing the same client code with the third factory type:"
    assert client_header(10) == "Client: Testing the same client code with the 11th factory type:"
    assert client_header(21) == "Client: Testing the same client code with the 22nd factory type:"


@pytest.mark.unit
def test_furniture_demo_output_matches_original_layout() -> None:
    sink = io.StringIO()
    DemoOrchestrator(furniture_factories=[ArDekoFactory(), ModernFactory()], out=sink).run_demo()

    assert sink.getvalue() == (
        "Client: Testing client code with the first factory type:\n"
        "The result of the product B1.\n"
        "The result of the B1 collaborating with the (The result of the product A1.)\n"
        "\n"
        "Client: Testing the same client code with the second factory type:\n"
        "The result of the product B2.\n"
        "The result of the B2 collaborating with the (The result of the product A2.)\n"
    )


@pytest.mark.unit
def test_full_demo_runs_furniture_then_database() -> None:
    sink = io.StringIO()
    orchestrator = DemoOrchestrator(
        furniture_factories=[ArDekoFactory()],
        database_factories=[PostgreSQLFactory(), OracleFactory()],
        out=sink,
    )
    orchestrator.run_demo()

    assert sink.getvalue() == (
        "Client: Testing client code with the first factory type:\n"
        "The result of the product B1.\n"
        "The result of the B1 collaborating with the (The result of the product A1.)\n"
        "\n"
        "Client: Testing client code with the first factory type:\n"
        "PostgreSQL DB connected\n"
        "Record added to PostgreSQL DB\n"
        "PostgreSQL DB query was executed successfully\n"
        "\n"
        "Client: Testing the same client code with the second factory type:\n"
        "Oracle DB connected\n"
        "Record added to Oracle DB\n"
        "Oracle DB query was executed successfully\n"
    )


@pytest.mark.unit
def test_empty_orchestrator_writes_nothing() -> None:
    sink = io.StringIO()
    DemoOrchestrator(out=sink).run_demo()
    assert sink.getvalue() == ""
