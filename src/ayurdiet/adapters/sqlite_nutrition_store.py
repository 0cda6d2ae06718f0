"""SQLite-backed IFCT nutrition reference store."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from sqlalchemy import (
    Column,
    Engine,
    Integer,
    MetaData,
    Numeric,
    Select,
    Table,
    create_engine,
    func,
    literal_column,
    select,
)
from sqlalchemy.engine import URL, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from ayurdiet.domain.errors import InvalidNutrientKey, StoreUnavailable
from ayurdiet.domain.nutrition import NUTRIENT_ALIASES, NutritionRecord
from ayurdiet.services.nutrition import NutritionStore

TABLE_NAME = "ifct"
# Header of the first CSV column may carry a UTF-8 BOM.
_BOM = "\ufeff"
_IDENTIFIER_COLUMNS = {"code", "name", "scie", "grup", "regn"}

_logger = logging.getLogger(__name__)


@dataclass
class SqliteNutritionStore(NutritionStore):
    """Read-only nutrition store over an IFCT SQLite database."""

    engine: Engine
    table: Table
    columns: dict[str, Column] = field(default_factory=dict)
    nutrient_columns: dict[str, Column] = field(default_factory=dict)
    _closed: bool = False

    @classmethod
    def open(cls, path: str | Path) -> "SqliteNutritionStore":
        """Open the dataset read-only and reflect its schema."""
        db_path = Path(path)
        if not db_path.is_file():
            raise StoreUnavailable(f"Nutrition dataset not found at {db_path}")
        url = URL.create(
            "sqlite",
            database=f"file:{db_path.resolve()}",
            query={"mode": "ro", "uri": "true"},
        )
        engine = create_engine(url, connect_args={"check_same_thread": False})
        try:
            table = Table(TABLE_NAME, MetaData(), autoload_with=engine)
        except SQLAlchemyError as exc:
            engine.dispose()
            raise StoreUnavailable(
                f"Nutrition dataset at {db_path} is unreadable"
            ) from exc

        columns = {column.name.lstrip(_BOM): column for column in table.columns}
        missing = {"code", "name"} - columns.keys()
        if missing:
            engine.dispose()
            raise StoreUnavailable(
                f"Nutrition dataset is missing columns: {sorted(missing)}"
            )
        nutrient_columns = {
            name: column
            for name, column in columns.items()
            if name not in _IDENTIFIER_COLUMNS
            and isinstance(column.type, (Numeric, Integer))
        }
        _logger.info(
            "Opened nutrition dataset %s with %s nutrient columns",
            db_path,
            len(nutrient_columns),
        )
        return cls(
            engine=engine,
            table=table,
            columns=columns,
            nutrient_columns=nutrient_columns,
        )

    def find_by_name(self, query: str) -> list[NutritionRecord]:
        """Case-insensitive substring match on the food name."""
        cleaned = query.strip().lower() if query else ""
        if not cleaned:
            return []
        pattern = f"%{_escape_like(cleaned)}%"
        statement = (
            select(self.table)
            .where(func.lower(self.columns["name"]).like(pattern, escape="\\"))
            .order_by(literal_column("rowid"))
        )
        return self._fetch(statement)

    def find_by_nutrient_range(
        self, nutrient_key: str, minimum: float, maximum: float
    ) -> list[NutritionRecord]:
        """Return records whose nutrient lies within inclusive bounds."""
        column_name = NUTRIENT_ALIASES.get(nutrient_key, nutrient_key)
        column = self.nutrient_columns.get(column_name)
        if column is None:
            raise InvalidNutrientKey(nutrient_key)
        statement = (
            select(self.table)
            .where(column.between(minimum, maximum))
            .order_by(literal_column("rowid"))
        )
        return self._fetch(statement)

    def find_by_code(self, code: str) -> NutritionRecord | None:
        """Return the record with exactly this code."""
        statement = select(self.table).where(self.columns["code"] == code).limit(1)
        records = self._fetch(statement)
        return records[0] if records else None

    def close(self) -> None:
        """Dispose of the engine; safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self.engine.dispose()

    def _fetch(self, statement: Select) -> list[NutritionRecord]:
        if self._closed:
            raise StoreUnavailable("Nutrition store is closed")
        try:
            with self.engine.connect() as connection:
                rows = connection.execute(statement).mappings().all()
        except SQLAlchemyError as exc:
            raise StoreUnavailable("Nutrition dataset query failed") from exc
        return [self._to_record(row) for row in rows]

    def _to_record(self, row: RowMapping) -> NutritionRecord:
        def value(name: str) -> object:
            column = self.columns.get(name)
            return row[column] if column is not None else None

        nutrients: dict[str, float] = {}
        for name, column in self.nutrient_columns.items():
            raw = row[column]
            if raw is not None:
                nutrients[name] = float(raw)
        scientific_name = value("scie")
        category = value("grup")
        return NutritionRecord(
            code=str(value("code")),
            name=str(value("name")),
            scientific_name=str(scientific_name) if scientific_name else None,
            category=str(category) if category else None,
            nutrients=nutrients,
        )


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so the query is matched literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
