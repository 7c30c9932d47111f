from typing import Any, Dict
from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncSession

EXPECTED_TABLES = [
    "totes",
    "items",
    "item_photos",
    "item_metadata",
    "metadata_keys",
    "item_movement_history",
    "settings",
]

# ==================== Read ====================
async def check_database(db: AsyncSession) -> None:
    await db.execute(text("SELECT 1"))


async def read_schema(db: AsyncSession) -> Dict[str, Any]:
    """列出資料表、欄位與外鍵，並確認外鍵檢查已開啟"""
    connection = await db.connection()
    schemas = await connection.run_sync(_inspect_tables)
    tables = sorted(schemas.keys())

    foreign_keys_enabled = (await db.execute(text("PRAGMA foreign_keys"))).scalar_one()
    missing_tables = [name for name in EXPECTED_TABLES if name not in schemas]

    return {
        "tables": tables,
        "schemas": schemas,
        "foreign_keys_enabled": foreign_keys_enabled == 1,
        "missing_tables": missing_tables,
        "all_tables_present": not missing_tables,
    }


# ==================== Private Method ====================

def _inspect_tables(sync_connection) -> Dict[str, Any]:
    inspector = inspect(sync_connection)
    schemas: Dict[str, Any] = {}
    for table_name in inspector.get_table_names():
        if table_name == "sqlite_sequence":
            continue
        primary_keys = set(inspector.get_pk_constraint(table_name).get("constrained_columns") or [])
        schemas[table_name] = {
            "columns": [
                {
                    "name": column["name"],
                    "type": str(column["type"]),
                    "notnull": not column["nullable"],
                    "pk": column["name"] in primary_keys,
                    "default_value": column.get("default"),
                }
                for column in inspector.get_columns(table_name)
            ],
            "foreign_keys": [
                {
                    "from": from_column,
                    "references_table": fk["referred_table"],
                    "references_column": to_column,
                    "on_delete": (fk.get("options") or {}).get("ondelete", "NO ACTION"),
                }
                for fk in inspector.get_foreign_keys(table_name)
                for from_column, to_column in zip(fk["constrained_columns"], fk["referred_columns"])
            ],
        }
    return schemas
