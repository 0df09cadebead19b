import os

from dotenv import load_dotenv
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker

load_dotenv()

SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./listing_admin.db")


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {}


engine = create_engine(SQLALCHEMY_DATABASE_URL, **_engine_kwargs(SQLALCHEMY_DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# JSON field groups added after the first release of the projects table.
_PROJECT_COLUMN_SPECS = {
    "description_en": "TEXT",
    "price_currency": "VARCHAR(8) DEFAULT 'AED'",
    "highlights_json": "TEXT",
    "amenities_json": "TEXT",
    "payment_plan_json": "TEXT",
    "payment_plans_json": "TEXT",
    "faqs_json": "TEXT",
    "neighborhood_json": "TEXT",
    "units_json": "TEXT",
    "floor_plans_json": "TEXT",
}


def _run_schema_statement(connection, sql: str) -> None:
    try:
        connection.execute(text(sql))
    except Exception as exc:  # noqa: BLE001
        print(f"[database] schema statement skipped: {exc} | sql={sql}")


def ensure_runtime_schema(bind=None) -> None:
    """Keep table/column compatibility without Alembic migrations."""
    target = bind or engine
    Base.metadata.create_all(bind=target)

    with target.begin() as connection:
        inspector = inspect(connection)
        if "projects" not in set(inspector.get_table_names()):
            return
        existing_columns = {column["name"] for column in inspector.get_columns("projects")}
        for column_name, column_spec in _PROJECT_COLUMN_SPECS.items():
            if column_name in existing_columns:
                continue
            _run_schema_statement(
                connection,
                f"ALTER TABLE projects ADD COLUMN {column_name} {column_spec}",
            )

        _run_schema_statement(
            connection,
            "UPDATE projects SET price_currency='AED' WHERE price_currency IS NULL",
        )


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
