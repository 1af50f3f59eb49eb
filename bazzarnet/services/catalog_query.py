"""
Builds the MongoDB filter for product searches.

Each optional filter contributes one clause and all clauses are ANDed.
Pincode scoping is resolved by the caller into a list of store ids
before the query is built.
"""

import re
from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId

from bazzarnet.core.errors import BadRequestError
from bazzarnet.models.product import ALL_CATEGORIES
from bazzarnet.utils.validators import to_object_id

ALL_STORES = "all"


def parse_store_id(store: Optional[str]) -> Optional[ObjectId]:
    """
    Store filter value as an ObjectId, or None when the filter is off.

    Raises:
        BadRequestError: the value is set but is not a valid ObjectId
    """
    if not store or store == ALL_STORES:
        return None

    store_id = to_object_id(store)
    if store_id is None:
        raise BadRequestError("Invalid store ID format provided.", details={"store": store})
    return store_id


def combine_clauses(clauses: List[Dict[str, Any]]) -> Dict[str, Any]:
    """AND the clauses together, flattening them when no two target the same field"""
    query: Dict[str, Any] = {}
    for clause in clauses:
        if query.keys() & clause.keys():
            return {"$and": clauses}
        query.update(clause)
    return query


def build_product_query(
    search: Optional[str] = None,
    category: Optional[str] = None,
    store_id: Optional[ObjectId] = None,
    pincode_store_ids: Optional[Iterable[ObjectId]] = None,
) -> Dict[str, Any]:
    """
    Args:
        search: case-insensitive substring of the product name
        category: exact category, ``"all"`` or empty disables it
        store_id: exact owning store, already validated by parse_store_id
        pincode_store_ids: stores serving the requested pincode; None when no
            pincode was given. An empty list matches nothing.
    """
    clauses: List[Dict[str, Any]] = []

    if search and search.strip():
        clauses.append({"name": {"$regex": re.escape(search.strip()), "$options": "i"}})

    if category and category != ALL_CATEGORIES:
        clauses.append({"category": category})

    if store_id is not None:
        clauses.append({"store": store_id})

    if pincode_store_ids is not None:
        clauses.append({"store": {"$in": list(pincode_store_ids)}})

    return combine_clauses(clauses)
