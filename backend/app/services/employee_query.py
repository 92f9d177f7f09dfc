"""
Roster Backend — Employee Listing Query Builder
=================================================

What:  Turns an EmployeeFilter into one parameterized SELECT statement.
How:   EmployeeQueryBuilder collects predicate fragments and, in a parallel
       list, the values they bind. render() walks both lists once, numbering
       placeholders in append order (:p1, :p2, ...), then appends LIMIT and
       OFFSET last. Builders are created per call; nothing is shared.

Rendered statement (all filters supplied):

    SELECT e.identity_number, e.name, e.employee_image_uri, e.gender, e.department_id
    FROM employees AS e
    JOIN departments AS d ON e.department_id = d.department_id
    JOIN managers AS m ON d.manager_id = m.manager_id
    WHERE m.manager_id = :p1
      AND LOWER(e.identity_number) LIKE (LOWER(:p2) || '%') ESCAPE '\\'
      AND LOWER(e.name) LIKE ('%' || LOWER(:p3) || '%') ESCAPE '\\'
      AND e.gender = :p4
      AND e.department_id = :p5
    ORDER BY e.created_at DESC, e.identity_number
    LIMIT :p6 OFFSET :p7

Case-insensitive matching uses LOWER(...) LIKE so the statement runs
unchanged on PostgreSQL and on SQLite.
"""

from typing import Any, Dict, List, NamedTuple, Tuple

from app.schemas.employee import EmployeeFilter

SELECT_EMPLOYEES = (
    "SELECT e.identity_number, e.name, e.employee_image_uri, e.gender, e.department_id "
    "FROM employees AS e "
    "JOIN departments AS d ON e.department_id = d.department_id "
    "JOIN managers AS m ON d.manager_id = m.manager_id"
)

ORDER_BY = "ORDER BY e.created_at DESC, e.identity_number"

# Each template has exactly one "{}" slot for the bound placeholder
MANAGER_SCOPE = "m.manager_id = {}"
IDENTITY_NUMBER_PREFIX = "LOWER(e.identity_number) LIKE (LOWER({}) || '%') ESCAPE '\\'"
NAME_CONTAINS = "LOWER(e.name) LIKE ('%' || LOWER({}) || '%') ESCAPE '\\'"
GENDER_EQUALS = "e.gender = {}"
DEPARTMENT_EQUALS = "e.department_id = {}"

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """
    Make `value` match literally inside a LIKE pattern using ESCAPE '\\'.

    >>> escape_like("50%_off")
    '50\\\\%\\\\_off'
    """
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class RenderedQuery(NamedTuple):
    """A rendered statement plus its values in placeholder order."""

    sql: str
    params: List[Any]

    @property
    def bind_params(self) -> Dict[str, Any]:
        """Values keyed by placeholder name (p1, p2, ...) for sqlalchemy.text()."""
        return {f"p{index}": value for index, value in enumerate(self.params, start=1)}


class EmployeeQueryBuilder:
    """
    Accumulates WHERE predicates for the employee listing statement.

    The manager scope predicate is always the first one. Callers add optional
    predicates with where(); render() produces the final statement without
    changing the builder, so rendering twice gives the same result.
    """

    def __init__(self, manager_id: str):
        self._predicates: List[Tuple[str, Any]] = []
        self.where(MANAGER_SCOPE, manager_id)

    def where(self, template: str, value: Any) -> "EmployeeQueryBuilder":
        self._predicates.append((template, value))
        return self

    @property
    def predicate_count(self) -> int:
        return len(self._predicates)

    def render(self, limit: int, offset: int) -> RenderedQuery:
        params: List[Any] = []

        def bind(value: Any) -> str:
            params.append(value)
            return f":p{len(params)}"

        conditions = " AND ".join(
            template.format(bind(value)) for template, value in self._predicates
        )
        limit_slot = bind(limit)
        offset_slot = bind(offset)

        sql = (
            f"{SELECT_EMPLOYEES} WHERE {conditions} {ORDER_BY} "
            f"LIMIT {limit_slot} OFFSET {offset_slot}"
        )
        return RenderedQuery(sql=sql, params=params)


def build_employee_query(criteria: EmployeeFilter) -> RenderedQuery:
    """
    Render the listing statement for `criteria`.

    Optional filters are applied only when non-empty, in a fixed order:
    identity number, name, gender, department.
    """
    builder = EmployeeQueryBuilder(criteria.manager_id)

    if criteria.identity_number:
        builder.where(IDENTITY_NUMBER_PREFIX, escape_like(criteria.identity_number))
    if criteria.name:
        builder.where(NAME_CONTAINS, escape_like(criteria.name))
    if criteria.gender:
        builder.where(GENDER_EQUALS, criteria.gender)
    if criteria.department_id:
        builder.where(DEPARTMENT_EQUALS, criteria.department_id)

    return builder.render(limit=criteria.limit, offset=criteria.offset)
