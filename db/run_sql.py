# db/run_sql.py
import argparse
import sys
from pathlib import Path

import psycopg

from vehicle_api.app import config


def run_sql_file(name: str) -> None:
    sql_path = Path(__file__).with_name(name)
    if not sql_path.exists():
        raise FileNotFoundError(f"{name} not found at: {sql_path}")

    sql_script = sql_path.read_text(encoding="utf-8")

    # with docker-compose the host is the service name, e.g. db
    with psycopg.connect(config.database_url()) as conn:
        with conn.cursor() as cur:
            cur.execute(sql_script)
        conn.commit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Reset the vehicle table.")
    parser.add_argument("--with-examples", action="store_true", help="load example_data.sql after init.sql")
    args = parser.parse_args(argv)

    scripts = ["drop_all.sql", "init.sql"]
    if args.with_examples:
        scripts.append("example_data.sql")
    try:
        for name in scripts:
            run_sql_file(name)
            print(f"{name} applied.")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
