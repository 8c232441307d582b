"""
List Query Builder - pagination, sorting, pencarian, dan filter bersama

Dipakai oleh semua endpoint list. Kondisi filter dibangun oleh fungsi murni
dan dipakai ulang untuk query data maupun query count, sehingga total selalu
dihitung dengan join dan filter yang sama dengan halaman yang dikembalikan.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import and_, asc, desc, distinct, func, or_
from sqlalchemy.orm import Session

from app.schemas import ListParams


@dataclass(frozen=True)
class ListSpec:
    """Deskripsi statis query list sebuah entitas"""
    model: Any
    sort_columns: Dict[str, Any]
    default_sort: str
    search_columns: Sequence[Any] = ()
    # pattern -> klausa, untuk pencarian lewat subquery (misalnya nama aplikasi milik vendor)
    search_subqueries: Sequence[Callable[[str], Any]] = ()
    # (target, onclause) yang di-LEFT JOIN ke model utama
    joins: Sequence[Tuple[Any, Any]] = field(default_factory=tuple)


def search_condition(search: Optional[str], columns: Sequence[Any], subqueries: Sequence[Callable] = ()):
    """Case-insensitive substring match, OR di semua kolom"""
    if not search or not (columns or subqueries):
        return None
    pattern = f"%{search}%"
    clauses = [column.ilike(pattern) for column in columns]
    clauses.extend(make_clause(pattern) for make_clause in subqueries)
    return or_(*clauses)


def build_conditions(spec: ListSpec, params: ListParams, extra: Sequence[Any] = ()) -> Tuple[Any, ...]:
    """Kumpulkan kondisi WHERE tanpa mengubah state apa pun"""
    conditions: Tuple[Any, ...] = ()
    searched = search_condition(params.search, spec.search_columns, spec.search_subqueries)
    if searched is not None:
        conditions = conditions + (searched,)
    return conditions + tuple(c for c in extra if c is not None)


def order_clauses(spec: ListSpec, params: ListParams) -> List[Any]:
    """sortBy di luar allow-list jatuh ke kolom default entitas"""
    column = spec.sort_columns.get(params.sort_by, spec.sort_columns[spec.default_sort])
    direction = desc if params.sort_order == "desc" else asc
    return [direction(column), asc(spec.model.id)]


def apply_joins(query, spec: ListSpec):
    for target, onclause in spec.joins:
        query = query.outerjoin(target, onclause)
    return query


def count_total(db: Session, spec: ListSpec, conditions: Sequence[Any]) -> int:
    query = apply_joins(db.query(func.count(distinct(spec.model.id))).select_from(spec.model), spec)
    if conditions:
        query = query.filter(and_(*conditions))
    return query.scalar() or 0


def fetch_page(
    db: Session,
    spec: ListSpec,
    params: ListParams,
    conditions: Sequence[Any],
    entities: Sequence[Any] = (),
    group_by: Sequence[Any] = (),
) -> Tuple[list, int]:
    """
    Jalankan query halaman dan query count dengan kondisi yang sama.

    `entities` default ke model utama saja; kolom agregat tambahan
    (misalnya jumlah aplikasi) bisa diberikan bersama `group_by`.
    """
    total = count_total(db, spec, conditions)

    query = db.query(*(entities or (spec.model,))).select_from(spec.model)
    query = apply_joins(query, spec)
    if conditions:
        query = query.filter(and_(*conditions))
    if group_by:
        query = query.group_by(*group_by)

    rows = (
        query.order_by(*order_clauses(spec, params))
        .offset(params.offset)
        .limit(params.limit)
        .all()
    )
    return rows, total


def calculate_pagination(data: list, page: int, limit: int, total: int) -> Dict[str, Any]:
    """Bungkus satu halaman data dengan metadata pagination"""
    total_pages = math.ceil(total / limit) if limit else 0
    return {
        "data": data,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "totalPages": total_pages,
            "hasNext": page < total_pages,
            "hasPrev": page > 1
        }
    }
