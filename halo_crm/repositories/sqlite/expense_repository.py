"""SQLite implementation of ExpenseRepository."""

from ..interfaces.expense_repository import IExpenseRepository
from ...domain.expense import BonusEntry, Expense
from ...config import logger as log
from .connection import SQLiteConnection


class SQLiteExpenseRepository(IExpenseRepository):
    """SQLite implementation of expense and bonus income repository."""

    def __init__(self, connection: SQLiteConnection):
        self._conn = connection

    def list_expenses(self) -> list[Expense]:
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM expenses ORDER BY date DESC, id")
            return [Expense.from_dict(dict(row)) for row in cursor.fetchall()]

    def save_expense(self, expense: Expense) -> Expense:
        log.info(
            "repo.expense",
            "save_expense",
            expense_id=expense.id,
            amount=expense.amount,
            category=expense.category,
        )
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """INSERT OR REPLACE INTO expenses (id, name, amount, date, category)
                   VALUES (?, ?, ?, ?, ?)""",
                (expense.id, expense.name, expense.amount, expense.date, expense.category),
            )
        return expense

    def delete_expense(self, expense_id: str) -> bool:
        log.info("repo.expense", "delete_expense", expense_id=expense_id)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM expenses WHERE id = ?", (expense_id,))
            return cursor.rowcount > 0

    def list_bonus_entries(self) -> list[BonusEntry]:
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM bonus_entries ORDER BY date DESC, id")
            return [BonusEntry.from_dict(dict(row)) for row in cursor.fetchall()]

    def save_bonus_entry(self, entry: BonusEntry) -> BonusEntry:
        log.info("repo.expense", "save_bonus_entry", entry_id=entry.id, amount=entry.amount)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """INSERT OR REPLACE INTO bonus_entries (id, description, amount, date)
                   VALUES (?, ?, ?, ?)""",
                (entry.id, entry.description, entry.amount, entry.date),
            )
        return entry
