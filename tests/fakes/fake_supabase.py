"""Fake in-memory Supabase client for db-layer testing.

Covers the slice of the postgrest query builder the db modules use:
select/eq/limit, insert, update, upsert with on_conflict and
ignore_duplicates, and rpc for the database functions in migrations/.
"""

import copy
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class FakeResponse:
    data: List[Dict[str, Any]] = field(default_factory=list)


class FakeQuery:
    """One chained query against a single table."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.op = "select"
        self.payload: Any = None
        self.filters: List[tuple] = []
        self.row_limit: int | None = None
        self.on_conflict: str | None = None
        self.ignore_duplicates = False

    def select(self, columns: str = "*") -> "FakeQuery":
        self.op = "select"
        return self

    def insert(self, payload: Any) -> "FakeQuery":
        self.op = "insert"
        self.payload = payload
        return self

    def update(self, payload: Dict[str, Any]) -> "FakeQuery":
        self.op = "update"
        self.payload = payload
        return self

    def upsert(
        self, payload: Any, on_conflict: str = "", ignore_duplicates: bool = False
    ) -> "FakeQuery":
        self.op = "upsert"
        self.payload = payload
        self.on_conflict = on_conflict
        self.ignore_duplicates = ignore_duplicates
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def limit(self, count: int) -> "FakeQuery":
        self.row_limit = count
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self) -> FakeResponse:
        self.db.calls.append((self.table, self.op))
        if self.table in self.db.fail_tables:
            raise ConnectionError(f"{self.table} unavailable")

        rows = self.db.tables.setdefault(self.table, [])

        if self.op == "select":
            found = [copy.deepcopy(r) for r in rows if self._matches(r)]
            if self.row_limit is not None:
                found = found[: self.row_limit]
            return FakeResponse(found)

        if self.op == "insert":
            return FakeResponse([self.db.add_row(self.table, r) for r in _as_list(self.payload)])

        if self.op == "update":
            updated = []
            for row in rows:
                if self._matches(row):
                    row.update(copy.deepcopy(self.payload))
                    updated.append(copy.deepcopy(row))
            return FakeResponse(updated)

        if self.op == "upsert":
            keys = [k.strip() for k in (self.on_conflict or "id").split(",")]
            written = []
            for new_row in _as_list(self.payload):
                existing = next(
                    (r for r in rows if all(r.get(k) == new_row.get(k) for k in keys)), None
                )
                if existing is None:
                    written.append(self.db.add_row(self.table, new_row))
                elif not self.ignore_duplicates:
                    existing.update(copy.deepcopy(new_row))
                    written.append(copy.deepcopy(existing))
            return FakeResponse(written)

        raise ValueError(f"Unsupported operation {self.op}")


def _as_list(payload: Any) -> List[Dict[str, Any]]:
    return payload if isinstance(payload, list) else [payload]


class FakeRpc:
    """One database function call; runs against the table it writes."""

    def __init__(self, db: "FakeSupabase", name: str, params: Dict[str, Any]):
        self.db = db
        self.name = name
        self.params = params

    def execute(self) -> FakeResponse:
        if self.name not in _FUNCTIONS:
            raise ValueError(f"Unknown function {self.name}")
        table, handler = _FUNCTIONS[self.name]
        self.db.calls.append((table, f"rpc:{self.name}"))
        if table in self.db.fail_tables:
            raise ConnectionError(f"{table} unavailable")
        return FakeResponse(handler(self.db.tables.setdefault(table, []), self.params))


def _update_idea_scores(rows: List[Dict[str, Any]], params: Dict[str, Any]) -> List[Dict[str, Any]]:
    # Mirrors migrations/0002_update_idea_scores_fn.sql
    updated = []
    for row in rows:
        if row.get("id") == params["p_idea_id"] and row.get("user_id") == params["p_user_id"]:
            row["analysis"] = {**(row.get("analysis") or {}), **copy.deepcopy(params["p_scores"])}
            if row.get("base_score") is None:
                row["base_score"] = params.get("p_base_score")
            row["updated_at"] = "now"
            updated.append(copy.deepcopy(row))
    return updated


_FUNCTIONS = {
    "update_idea_scores": ("ideas", _update_idea_scores),
}


class FakeSupabase:
    """In-memory stand-in for supabase.Client table and rpc access."""

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.calls: List[tuple] = []
        self.fail_tables: set[str] = set()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rpc(self, name: str, params: Dict[str, Any]) -> FakeRpc:
        return FakeRpc(self, name, params)

    def add_row(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        stored = copy.deepcopy(row)
        stored.setdefault("id", str(uuid.uuid4()))
        self.tables.setdefault(table, []).append(stored)
        return copy.deepcopy(stored)

    def rows(self, table: str) -> List[Dict[str, Any]]:
        return self.tables.get(table, [])
