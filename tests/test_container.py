from swipe_attendance.container import build_container


def db(name):
    return {"host": "localhost", "port": 3306, "user": "root", "password": "", "database": name}


def test_each_container_keeps_its_own_database():
    first = build_container(db_config=db("attendance_a"))
    second = build_container(db_config=db("attendance_b"))

    assert first.conn is not second.conn
    assert first.conn.config.database == "attendance_a"
    assert second.conn.config.database == "attendance_b"


def test_container_repositories_share_the_container_connection():
    container = build_container(db_config=db("attendance_a"))

    assert container.employees_repo._conn_factory is container.conn
    assert container.leaves_repo._conn_factory is container.conn


def test_missing_port_defaults_to_mysql_port():
    cfg = db("attendance_a")
    del cfg["port"]

    assert build_container(db_config=cfg).conn.config.port == 3306
