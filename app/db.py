import os
from psycopg import Connection
from psycopg.rows import dict_row

def get_db_url() -> str:
    db_url = os.getenv("DATABASE_URL")
    if not db_url:
        raise RuntimeError("DATABASE_URL is not set (required when ARTICLE_STORE=postgres)")
    return db_url

def get_conn() -> Connection:
    # rows come back as dicts keyed by column name, which Article(**row) expects
    timeout = int(os.getenv("DB_CONNECT_TIMEOUT", "5"))
    return Connection.connect(get_db_url(), row_factory=dict_row, connect_timeout=timeout)
