"""
Dialect-specific SQL constructs used by aggregation queries.

``utc_day`` renders a timestamp column as its UTC calendar day in
``YYYY-MM-DD`` form, so grouping by it buckets rows per day regardless of
which database the service runs against.
"""
from sqlalchemy import String
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import FunctionElement


class utc_day(FunctionElement):
    type = String()
    inherit_cache = True
    name = "utc_day"


@compiles(utc_day)
def _utc_day_default(element, compiler, **kw):
    # SQLite stores naive UTC timestamps; date() yields YYYY-MM-DD
    return "date(%s)" % compiler.process(element.clauses, **kw)


@compiles(utc_day, "postgresql")
def _utc_day_postgresql(element, compiler, **kw):
    return "to_char(%s AT TIME ZONE 'UTC', 'YYYY-MM-DD')" % compiler.process(
        element.clauses, **kw
    )
