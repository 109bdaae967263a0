"""
Expense service: one account's expense entries.

Every method takes the owner's account id and scopes its query
by it. Updating or deleting an id that belongs to someone else
matches no row and reports False, exactly like an id that does
not exist, so other accounts' ids are never revealed.
"""

from sqlalchemy import select, update, delete, extract
from sqlalchemy.orm import Session

from expense_tracker.errors import ValidationError
from expense_tracker.models.expense import Expense
from expense_tracker.schemas.expense import ExpenseCreate, ExpenseUpdate


class ExpenseService:

    def __init__(self, db: Session):
        self.db = db

    def create_expense(self, owner_id: int, request: ExpenseCreate) -> Expense:
        expense = Expense(
            account_id=owner_id,
            spent_on=request.spent_on,
            amount=request.amount,
            responsible_party=request.responsible_party,
            category=request.category,
            description=request.description or "",
            location=request.location,
        )
        self.db.add(expense)
        self.db.flush()
        return expense

    def list_expenses(
        self,
        owner_id: int,
        year: int | None = None,
        month: int | None = None,
    ) -> list[Expense]:
        """
        Return the owner's expenses, newest day first.

        year and month filter independently and can be combined.
        Entries on the same day come out highest id first.
        """
        if year is not None and not 1000 <= year <= 9999:
            raise ValidationError("year must have four digits")
        if month is not None and not 1 <= month <= 12:
            raise ValidationError("month must be between 1 and 12")

        query = select(Expense).where(Expense.account_id == owner_id)
        if year is not None:
            query = query.where(extract("year", Expense.spent_on) == year)
        if month is not None:
            query = query.where(extract("month", Expense.spent_on) == month)

        expenses = self.db.execute(
            query.order_by(Expense.spent_on.desc(), Expense.id.desc())
        ).scalars().all()
        return list(expenses)

    def update_expense(
        self, owner_id: int, expense_id: int, request: ExpenseUpdate
    ) -> bool:
        """Replace an expense's fields. The owner never changes."""
        result = self.db.execute(
            update(Expense)
            .where(Expense.account_id == owner_id, Expense.id == expense_id)
            .values({
                Expense.spent_on: request.spent_on,
                Expense.amount: request.amount,
                Expense.responsible_party: request.responsible_party,
                Expense.category: request.category,
                Expense.description: request.description or "",
                Expense.location: request.location,
            })
        )
        self.db.flush()
        return result.rowcount > 0

    def delete_expense(self, owner_id: int, expense_id: int) -> bool:
        result = self.db.execute(
            delete(Expense)
            .where(Expense.account_id == owner_id, Expense.id == expense_id)
        )
        self.db.flush()
        return result.rowcount > 0
