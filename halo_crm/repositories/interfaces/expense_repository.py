"""Interface for expense and bonus income repository."""

from abc import ABC, abstractmethod

from ...domain.expense import BonusEntry, Expense


class IExpenseRepository(ABC):
    """Contract for money-in and money-out records outside appointments."""

    @abstractmethod
    def list_expenses(self) -> list[Expense]:
        pass

    @abstractmethod
    def save_expense(self, expense: Expense) -> Expense:
        pass

    @abstractmethod
    def delete_expense(self, expense_id: str) -> bool:
        pass

    @abstractmethod
    def list_bonus_entries(self) -> list[BonusEntry]:
        pass

    @abstractmethod
    def save_bonus_entry(self, entry: BonusEntry) -> BonusEntry:
        pass
