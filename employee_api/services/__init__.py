# Services package init
"""
Employee API — Services Layer
===============================

What:  SQL layer sitting between routes (HTTP) and the connection pool.

Service Inventory:
    - EmployeeService: list / get / create / update / delete on `employee`
"""
