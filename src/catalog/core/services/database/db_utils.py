"""Engine helpers shared by the session service and the test fixtures."""

from sqlalchemy import event
from sqlalchemy.engine import Engine


def configure_sqlite_engine(engine: Engine) -> Engine:
    """Make a pysqlite engine honour SAVEPOINTs and foreign keys.

    pysqlite defers BEGIN until the first DML statement, which breaks nested
    transactions; SQLAlchemy's documented workaround is to disable the driver's
    transaction handling and emit BEGIN ourselves.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine
