"""
Employee API — Employee Service
=================================

What:  The five employee operations, each one SQL statement (update adds a
       re-SELECT) against the `employee` table.
How:   Runs the statement through the ConnectionPool it was constructed with,
       turns "no row" into NotFoundError and store failures into DatabaseError.
Who:   Built per request by the employees router (see get_employee_service).

Statement Inventory:
    list    SELECT * FROM employee ORDER BY id
    get     SELECT * FROM employee WHERE id = :id
    create  INSERT INTO employee (name, salary) VALUES (:name, :salary) RETURNING id
    update  UPDATE employee SET name = COALESCE(:name, name), ... WHERE id = :id
    delete  DELETE FROM employee WHERE id = :id

Error Handling Strategy:
    Every statement goes through _execute(). Failures are logged with the
    operation name and re-raised as DatabaseError; the global handler turns
    that into a 500. The existence check for update/delete is the affected
    row count. Ids outside the INTEGER column range are reported as not
    found without touching the store.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from fastapi import Depends

from employee_api.database import ConnectionPool, ResultMetadata, Row, get_pool
from employee_api.exceptions import DatabaseError, NotFoundError
from employee_api.schemas.employee import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
)

logger = logging.getLogger(__name__)

SELECT_ALL = "SELECT * FROM employee ORDER BY id"
SELECT_ONE = "SELECT * FROM employee WHERE id = :id"
INSERT = "INSERT INTO employee (name, salary) VALUES (:name, :salary) RETURNING id"
UPDATE = (
    "UPDATE employee "
    "SET name = COALESCE(:name, name), salary = COALESCE(:salary, salary) "
    "WHERE id = :id"
)
DELETE = "DELETE FROM employee WHERE id = :id"

# Range of the INTEGER id column (32-bit on PostgreSQL and MySQL)
MIN_ID = -(2 ** 31)
MAX_ID = 2 ** 31 - 1


class EmployeeService:
    """
    CRUD operations for employees.

    Stateless apart from the pool it is given.
    """

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    @staticmethod
    def _require_storable_id(employee_id: int) -> None:
        """An id the id column cannot hold matches no row; the driver would reject it."""
        if not MIN_ID <= employee_id <= MAX_ID:
            raise NotFoundError(resource="Employee", resource_id=employee_id)

    async def _execute(
        self,
        operation: str,
        sql: str,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> Tuple[List[Row], ResultMetadata]:
        try:
            return await self.pool.execute(sql, parameters)
        except DatabaseError as e:
            logger.error("Database error in %s: %s", operation, e.message)
            raise
        except Exception as e:
            logger.error("Database error in %s: %s", operation, str(e))
            raise DatabaseError(
                context={
                    "operation": operation,
                    "error_type": type(e).__name__,
                },
            ) from e

    async def list_employees(self) -> List[EmployeeResponse]:
        """Every employee row, ordered by id."""
        rows, _ = await self._execute("list_employees", SELECT_ALL)
        return [EmployeeResponse.model_validate(row) for row in rows]

    async def get_employee(self, employee_id: int) -> EmployeeResponse:
        """
        Retrieve a single employee by id.

        Raises:
            NotFoundError: No row has this id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        self._require_storable_id(employee_id)
        rows, _ = await self._execute("get_employee", SELECT_ONE, {"id": employee_id})
        if not rows:
            raise NotFoundError(resource="Employee", resource_id=employee_id)
        return EmployeeResponse.model_validate(rows[0])

    async def create_employee(self, payload: EmployeeCreate) -> EmployeeResponse:
        """
        Insert a new employee and echo it back with the store-assigned id.

        The response is built from the request values, not re-read from the
        table.
        """
        rows, _ = await self._execute(
            "create_employee",
            INSERT,
            {"name": payload.name, "salary": payload.salary},
        )
        employee_id = rows[0]["id"]
        logger.info("Employee %s created", employee_id)
        return EmployeeResponse(id=employee_id, name=payload.name, salary=payload.salary)

    async def update_employee(
        self,
        employee_id: int,
        payload: EmployeeUpdate,
    ) -> EmployeeResponse:
        """
        Partially update an employee and return the row as stored afterwards.

        Omitted fields are bound as NULL, which COALESCE replaces with the
        current column value.

        Raises:
            NotFoundError: No row has this id, or it vanished before re-read
        """
        self._require_storable_id(employee_id)
        params: Dict[str, Any] = {
            "id": employee_id,
            "name": payload.name,
            "salary": payload.salary,
        }
        _, meta = await self._execute("update_employee", UPDATE, params)
        if meta.affected_rows <= 0:
            raise NotFoundError(resource="Employee", resource_id=employee_id)

        rows, _ = await self._execute("update_employee", SELECT_ONE, {"id": employee_id})
        if not rows:
            raise NotFoundError(resource="Employee", resource_id=employee_id)
        logger.info("Employee %s updated", employee_id)
        return EmployeeResponse.model_validate(rows[0])

    async def delete_employee(self, employee_id: int) -> None:
        """
        Delete an employee.

        Raises:
            NotFoundError: No row has this id (zero affected rows)
        """
        self._require_storable_id(employee_id)
        _, meta = await self._execute("delete_employee", DELETE, {"id": employee_id})
        if meta.affected_rows <= 0:
            raise NotFoundError(resource="Employee", resource_id=employee_id)
        logger.info("Employee %s deleted", employee_id)


def get_employee_service(pool: ConnectionPool = Depends(get_pool)) -> EmployeeService:
    """FastAPI dependency: an EmployeeService bound to the application's pool."""
    return EmployeeService(pool)
