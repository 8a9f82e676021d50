from appenv.runtime.dotenv_files import dotenv_paths, load_dotenv_files
from appenv.runtime.env import Environment


def test_environment_file_takes_precedence_over_base(environ, tmp_path):
    (tmp_path / ".env").write_text("DB_HOST=base\nDB_PORT=5432\n", encoding="utf-8")
    (tmp_path / ".env.staging").write_text("DB_HOST=staging\n", encoding="utf-8")

    loaded = load_dotenv_files(Environment.custom("staging"), directory=tmp_path)

    assert loaded == [tmp_path / ".env.staging", tmp_path / ".env"]
    assert environ["DB_HOST"] == "staging"
    assert environ["DB_PORT"] == "5432"


def test_process_variables_are_not_overridden(environ, tmp_path):
    (tmp_path / ".env").write_text("DB_HOST=from-file\n", encoding="utf-8")
    environ["DB_HOST"] = "from-process"

    load_dotenv_files(Environment.production(), directory=tmp_path)

    assert environ["DB_HOST"] == "from-process"


def test_missing_files_are_skipped(environ, tmp_path):
    assert load_dotenv_files(Environment.development(), directory=tmp_path) == []


def test_empty_name_only_uses_base_file(tmp_path):
    assert dotenv_paths(Environment.custom(""), tmp_path) == [tmp_path / ".env"]


def test_name_with_separators_stays_in_directory(tmp_path):
    paths = dotenv_paths(Environment.custom("../secrets"), tmp_path)

    assert paths[0] == tmp_path / ".env...%2Fsecrets"
    assert all(path.parent == tmp_path for path in paths)
