"""
Employee API — Employee Table Declaration
===========================================

What:  SQLAlchemy declaration of the `employee` table.
Who:   Imported only by the test suite (tests/conftest.py), which registers
       it on Base.metadata and runs create_all() to build a throwaway schema.
       Nothing in the application package imports it: the service layer
       issues its own SQL against the same table and column names.

The production table already exists and is owned by the deployment. This
module does not migrate anything; it records the shape the API relies on:

    employee(id INTEGER PRIMARY KEY AUTOINCREMENT, name, salary)
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.database import Base


class Employee(Base):
    """
    One employee row.

    Lifecycle:
        1. Inserted by POST /employees (the store assigns `id`)
        2. Read individually or listed in full
        3. Partially updated in place (absent fields keep their value)
        4. Hard-deleted; no soft-delete or history
    """

    __tablename__ = "employee"

    # Store-generated, unique and never changed after insert
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[Optional[str]] = mapped_column(
        String(45),
        nullable=True,
        default=None,
    )

    salary: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(10, 2),
        nullable=True,
        default=None,
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, name='{self.name}')>"
