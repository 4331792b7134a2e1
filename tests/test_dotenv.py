import os

import pytest

from shellenv.dotenv import Dotenv, build_file_path, load, overload, safe_load
from shellenv.errors import MalformedValueError, MissingVariableError, PathError
from shellenv.store import EnvironmentStore, MemoryStore


@pytest.fixture
def env_dir(tmp_path):
    (tmp_path / ".env").write_text(
        "APP_NAME=demo\n"
        'GREETING="a \\"quoted\\" value"\n'
        "FOO=bar # trailing comment\n"
        "PATH_HINT=${BASE}/bin\n",
        encoding="utf-8",
    )
    return tmp_path


def test_build_file_path_joins_directory_and_name():
    assert build_file_path("/srv/app/", ".env.local") == os.path.join("/srv/app", ".env.local")
    assert build_file_path("/srv/app", None) == os.path.join("/srv/app", ".env")


def test_load_returns_declared_names_and_lines(env_dir):
    store = MemoryStore({"BASE": "/srv"})

    result = Dotenv(env_dir, store=store).load()

    assert result.names == ["APP_NAME", "GREETING", "FOO", "PATH_HINT"]
    assert len(result.lines) == 4
    assert store.get("GREETING") == 'a "quoted" value'
    assert store.get("FOO") == "bar"
    assert store.get("PATH_HINT") == "/srv/bin"


def test_undeclared_reference_is_kept_literally(env_dir):
    store = MemoryStore()

    Dotenv(env_dir, store=store).load()

    assert store.get("PATH_HINT") == "${BASE}/bin"


def test_loading_twice_is_idempotent(env_dir):
    store = MemoryStore({"BASE": "/srv"})
    dotenv = Dotenv(env_dir, store=store)

    dotenv.load()
    snapshot = dict(store.values)
    dotenv.load()

    assert store.values == snapshot


def test_load_never_changes_existing_values(env_dir):
    existing = {"APP_NAME": "mine", "GREETING": "hi", "FOO": "foo", "PATH_HINT": "hint"}
    store = MemoryStore(existing)

    Dotenv(env_dir, store=store).load()

    assert store.values == existing


def test_overload_replaces_values_from_an_earlier_load(env_dir):
    store = MemoryStore({"APP_NAME": "mine"})
    dotenv = Dotenv(env_dir, store=store)

    dotenv.load()
    assert store.get("APP_NAME") == "mine"

    dotenv.overload()
    assert store.get("APP_NAME") == "demo"


def test_variable_names_reflect_latest_load(env_dir):
    dotenv = Dotenv(env_dir, store=MemoryStore())

    dotenv.load()
    dotenv.load()

    assert dotenv.variable_names == ["APP_NAME", "GREETING", "FOO", "PATH_HINT"]


def test_missing_directory_raises_from_load_but_not_safe_load(tmp_path):
    missing = tmp_path / "nowhere"
    store = MemoryStore()

    with pytest.raises(PathError):
        Dotenv(missing, store=store).load()

    result = Dotenv(missing, store=store).safe_load()
    assert result.names == []
    assert result.lines == []


def test_safe_load_does_not_hide_malformed_values(tmp_path):
    (tmp_path / ".env").write_text("FOO=bar baz\n", encoding="utf-8")

    with pytest.raises(MalformedValueError):
        Dotenv(tmp_path, store=MemoryStore()).safe_load()


def test_required_passes_when_all_names_exist(env_dir):
    dotenv = Dotenv(env_dir, store=MemoryStore())
    dotenv.load()

    validator = dotenv.required(["APP_NAME", "FOO"])

    assert validator.variables == ["APP_NAME", "FOO"]


def test_required_lists_every_missing_name(env_dir):
    dotenv = Dotenv(env_dir, store=MemoryStore())
    dotenv.load()

    with pytest.raises(MissingVariableError) as excinfo:
        dotenv.required(["DB_HOST", "APP_NAME", "DB_PASSWORD"])

    assert excinfo.value.missing == ["DB_HOST", "DB_PASSWORD"]


def test_required_accepts_single_name(env_dir):
    dotenv = Dotenv(env_dir, store=MemoryStore())

    with pytest.raises(MissingVariableError):
        dotenv.required("APP_NAME")


def test_module_level_helpers(env_dir, tmp_path):
    store = MemoryStore({"APP_NAME": "mine"})

    assert load(env_dir, store=store).names[0] == "APP_NAME"
    assert store.get("APP_NAME") == "mine"

    load(env_dir, immutable=False, store=store)
    assert store.get("APP_NAME") == "demo"

    store.set("APP_NAME", "again")
    overload(env_dir, store=store)
    assert store.get("APP_NAME") == "demo"

    assert safe_load(tmp_path / "missing", store=store).names == []


def test_default_store_writes_os_environ(tmp_path, monkeypatch):
    monkeypatch.setenv("SHELLENV_TEST_LOADED", "placeholder")
    monkeypatch.delenv("SHELLENV_TEST_LOADED")
    (tmp_path / ".env").write_text("SHELLENV_TEST_LOADED=yes\n", encoding="utf-8")

    dotenv = Dotenv(tmp_path)
    dotenv.load()

    assert isinstance(dotenv.store, EnvironmentStore)
    assert os.environ["SHELLENV_TEST_LOADED"] == "yes"


def test_safe_load_keeps_file_with_non_utf8_bytes(tmp_path):
    (tmp_path / ".env").write_bytes(b"DB_HOST=db\nGREETING=caf\xe9\n")
    store = MemoryStore()

    result = Dotenv(tmp_path, store=store).safe_load()

    assert result.names == ["DB_HOST", "GREETING"]
    assert store.get("DB_HOST") == "db"
    assert store.get("GREETING") == "caf\udce9"
