import os
from dotenv import load_dotenv

# Load environment variables from a .env file (if it exists)
# Values already present in the environment take precedence.
load_dotenv()


def parse_variations(raw: str) -> list[str]:
    """Splits a comma-separated list of variation names, dropping blanks."""
    return [name.strip() for name in raw.split(',') if name.strip()]


# --- Demo Configuration ---
FURNITURE_VARIATIONS = parse_variations(
    os.getenv("FURNITURE_VARIATIONS", "ArDeko,Modern")
)

DATABASE_VARIATIONS = parse_variations(
    os.getenv("DATABASE_VARIATIONS", "MySQL,PostgreSQL,Oracle")
)

# --- Logging ---
# Logs go to stderr; WARNING keeps the demo output on stdout uncluttered.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
