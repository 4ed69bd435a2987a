"""
Connection health check for external DBs.
"""

from typing import Any

from sqlrunner.models import ProductTypeEnum

from .connection import execute

_PING_SQL: dict[ProductTypeEnum, str] = {
    ProductTypeEnum.ORACLE: "SELECT 1 FROM DUAL",
}


def health_check(conn: Any, product_type: ProductTypeEnum) -> bool:
    """
    Run SELECT 1 (SELECT 1 FROM DUAL on Oracle) and return True if no exception.
    """
    cur = None
    try:
        cur = execute(conn, _PING_SQL.get(product_type, "SELECT 1"))
        cur.fetchone()
        return True
    except Exception:
        return False
    finally:
        if cur is not None:
            cur.close()
