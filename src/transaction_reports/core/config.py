import os

DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite://./transaction_reports.sqlite3")

# Remote JSON array used by /initialize and the `seed` CLI command
SEED_DATA_URL: str = os.getenv(
    "SEED_DATA_URL", "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
)
SEED_FETCH_TIMEOUT: float = float(os.getenv("SEED_FETCH_TIMEOUT", "30"))

GENERATE_SCHEMAS: bool = os.getenv("GENERATE_SCHEMAS", "True").lower() in ("true", "1", "t")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
# Comma separated logger-name prefixes, e.g. "transaction_reports.features.reports"
LOG_NAMESPACES: list[str] = [
    ns.strip() for ns in os.getenv("LOG_NAMESPACES", "").split(",") if ns.strip()
]

MODEL_MODULES: list[str] = ["transaction_reports.features.transactions.models"]

TORTOISE_ORM_CONFIG = {
    "connections": {"default": DATABASE_URL},
    "apps": {
        "models": {
            "models": MODEL_MODULES,
            "default_connection": "default",
        }
    },
}
