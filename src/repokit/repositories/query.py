"""
repokit.repositories.query

Translation of repository arguments into SQLAlchemy constructs.

Responsibilities:
- Criteria (mapping or tuple form) -> WHERE clauses.
- (column, direction) ordering -> ORDER BY clause.
- Column projection -> `load_only`, relation names -> `selectinload`.
- Validate limits and appended attribute names.

Every function raises `InvalidArgumentError` on malformed input, before any SQL runs.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import InstrumentedAttribute, load_only, selectinload
from sqlalchemy.orm.interfaces import LoaderOption
from sqlalchemy.sql.elements import ColumnElement

from repokit.errors import InvalidArgumentError

Criteria = Mapping[str, Any] | Sequence[Sequence[Any]]
OrderBy = Sequence[str] | str

WILDCARD = "*"
DIRECTIONS = ("asc", "desc")


def _in(column: InstrumentedAttribute, value: Any) -> ColumnElement[bool]:
    return column.in_(_as_list(value))


def _not_in(column: InstrumentedAttribute, value: Any) -> ColumnElement[bool]:
    return column.not_in(_as_list(value))


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise InvalidArgumentError(f"'in' comparison needs a collection, got {value!r}")
    return list(value)


_COLLECTIONS = (list, tuple, set, frozenset)


def _scalar(value: Any) -> Any:
    if isinstance(value, (*_COLLECTIONS, Mapping)):
        raise InvalidArgumentError(f"comparison needs a single value, got {value!r}")
    return value


def _eq(column: InstrumentedAttribute, value: Any) -> ColumnElement[bool]:
    # A collection matches any of its members, as in `where(column, [a, b])`.
    if value is None:
        return column.is_(None)
    if isinstance(value, _COLLECTIONS):
        return column.in_(list(value))
    return column == _scalar(value)


def _ne(column: InstrumentedAttribute, value: Any) -> ColumnElement[bool]:
    if value is None:
        return column.is_not(None)
    if isinstance(value, _COLLECTIONS):
        return column.not_in(list(value))
    return column != _scalar(value)


_OPERATORS: dict[str, Callable[[InstrumentedAttribute, Any], ColumnElement[bool]]] = {
    "=": _eq,
    "==": _eq,
    "!=": _ne,
    "<>": _ne,
    "<": lambda c, v: c < _scalar(v),
    "<=": lambda c, v: c <= _scalar(v),
    ">": lambda c, v: c > _scalar(v),
    ">=": lambda c, v: c >= _scalar(v),
    "like": lambda c, v: c.like(_scalar(v)),
    "not like": lambda c, v: c.not_like(_scalar(v)),
    "ilike": lambda c, v: c.ilike(_scalar(v)),
    "in": _in,
    "not in": _not_in,
    "is": lambda c, v: c.is_(_scalar(v)),
    "is not": lambda c, v: c.is_not(_scalar(v)),
}


def column_for(model: type, name: str) -> InstrumentedAttribute:
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError(f"column name must be a non-empty string, got {name!r}")
    if name not in sa_inspect(model).column_attrs:
        raise InvalidArgumentError(f"{model.__name__} has no column {name!r}")
    return getattr(model, name)


def _is_operator(token: Any) -> bool:
    return isinstance(token, str) and token.lower() in _OPERATORS


def compare(model: type, name: str, op: str, value: Any) -> ColumnElement[bool]:
    if not _is_operator(op):
        raise InvalidArgumentError(f"unsupported comparison operator {op!r}")
    return _OPERATORS[op.lower()](column_for(model, name), value)


def _condition(model: type, item: Sequence[Any]) -> ColumnElement[bool]:
    if isinstance(item, (str, bytes)) or not isinstance(item, Sequence):
        raise InvalidArgumentError(f"criterion must be a (column, [operator,] value) tuple, got {item!r}")
    if len(item) == 2:
        return compare(model, item[0], "=", item[1])
    if len(item) == 3:
        return compare(model, item[0], item[1], item[2])
    raise InvalidArgumentError(f"criterion must have 2 or 3 elements, got {len(item)}")


def build_criteria(model: type, criteria: Criteria | None) -> list[ColumnElement[bool]]:
    """
    Accepted forms:
    - {"name": "Ann", "age": (">=", 18), "manager_id": None, "status": ["a", "b"]}
    - [("name", "Ann"), ("age", ">=", 18)]
    - ("age", ">=", 18)  (a single condition)

    A list, set or non-operator tuple value means IN; a mapping value is rejected.
    """

    if not criteria:
        return []

    if isinstance(criteria, Mapping):
        clauses = []
        for name, expected in criteria.items():
            if isinstance(expected, tuple) and len(expected) == 2 and _is_operator(expected[0]):
                clauses.append(compare(model, name, expected[0], expected[1]))
            else:
                clauses.append(compare(model, name, "=", expected))
        return clauses

    if isinstance(criteria, (str, bytes)) or not isinstance(criteria, Sequence):
        raise InvalidArgumentError(f"unsupported criteria type {type(criteria).__name__}")

    if isinstance(criteria[0], str):
        return [_condition(model, criteria)]
    return [_condition(model, item) for item in criteria]


def build_ordering(model: type, order_by: OrderBy | None) -> ColumnElement[Any]:
    if isinstance(order_by, str):
        order_by = (order_by,)
    if not order_by or not order_by[0]:
        raise InvalidArgumentError("Column to order must be present")
    if len(order_by) > 2:
        raise InvalidArgumentError(f"ordering is (column, direction), got {tuple(order_by)!r}")

    column = column_for(model, order_by[0])
    direction = order_by[1] if len(order_by) == 2 and order_by[1] else "asc"
    if not isinstance(direction, str) or direction.lower() not in DIRECTIONS:
        raise InvalidArgumentError(f"order direction must be 'asc' or 'desc', got {direction!r}")
    return column.desc() if direction.lower() == "desc" else column.asc()


def projection(model: type, columns: Sequence[str] | None) -> list[LoaderOption]:
    if columns is None or WILDCARD in columns:
        return []
    if isinstance(columns, str):
        columns = (columns,)
    if not columns:
        raise InvalidArgumentError("columns must name at least one column or '*'")
    return [load_only(*(column_for(model, name) for name in columns))]


def eager_loads(model: type, relations: Sequence[str] | None) -> list[LoaderOption]:
    if not relations:
        return []
    mapper = sa_inspect(model)
    options = []
    for name in relations:
        if name not in mapper.relationships:
            raise InvalidArgumentError(f"{model.__name__} has no relationship {name!r}")
        options.append(selectinload(getattr(model, name)))
    return options


def check_limit(limit: Any) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidArgumentError(f"limit must be a positive integer, got {limit!r}")
    return limit


def check_appends(model: type, appends: Sequence[str] | None) -> tuple[str, ...]:
    if not appends:
        return ()
    if not callable(getattr(model, "append", None)):
        raise InvalidArgumentError(f"{model.__name__} does not support appended attributes")
    missing = [name for name in appends if not hasattr(model, name)]
    if missing:
        raise InvalidArgumentError(f"{model.__name__} has no attribute(s) {missing!r} to append")
    return tuple(appends)
